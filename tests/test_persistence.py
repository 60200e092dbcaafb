"""
Tests for output persistence — atomic file writes and stream output.
"""

import io
from pathlib import Path

import pytest

from lbconfig.core.persistence.output_file import OutputWriteError, emit, write_output


class TestWriteOutput:
    def test_writes_file(self, tmp_path: Path):
        path = tmp_path / "gobetween.toml"
        write_output("[api]\n", path)
        assert path.read_text() == "[api]\n"

    def test_creates_directories(self, tmp_path: Path):
        path = tmp_path / "deep" / "nested" / "gobetween.toml"
        write_output("[api]\n", path)
        assert path.is_file()

    def test_overwrites_existing(self, tmp_path: Path):
        path = tmp_path / "gobetween.toml"
        path.write_text("old")
        write_output("new", path)
        assert path.read_text() == "new"

    def test_no_temp_files_left(self, tmp_path: Path):
        path = tmp_path / "gobetween.toml"
        write_output("[api]\n", path)
        assert [p.name for p in tmp_path.iterdir()] == ["gobetween.toml"]

    def test_unwritable_target_raises(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(OutputWriteError, match="Cannot write"):
            write_output("[api]\n", blocker / "gobetween.toml")


class _BrokenStream(io.StringIO):
    def write(self, s):
        raise BrokenPipeError("pipe closed")


class TestEmit:
    def test_writes_to_stream(self):
        stream = io.StringIO()
        emit("[api]\n", stream)
        assert stream.getvalue() == "[api]\n"

    def test_stream_failure_raises(self):
        with pytest.raises(OutputWriteError, match="pipe closed"):
            emit("[api]\n", _BrokenStream())
