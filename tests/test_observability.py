"""
Tests for logging setup.
"""

import logging

import pytest

from lbconfig.core.observability.logging_config import parse_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_known_levels(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("INFO") == logging.INFO
        assert parse_level("error") == logging.ERROR

    def test_unknown_falls_back_to_warning(self):
        assert parse_level("chatty") == logging.WARNING

    def test_empty_falls_back_to_warning(self):
        assert parse_level(None) == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_single_console_handler(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging("INFO")
        setup_logging("DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_info_format_names_logger(self, capsys: pytest.CaptureFixture):
        setup_logging("INFO")
        logging.getLogger("lbconfig.test").info("rendered 2 blocks")
        assert "INFO lbconfig.test: rendered 2 blocks" in capsys.readouterr().err

    def test_warning_format_is_bare(self, capsys: pytest.CaptureFixture):
        setup_logging("WARNING")
        logging.getLogger("lbconfig.test").info("hidden")
        logging.getLogger("lbconfig.test").warning("no teams defined")
        assert capsys.readouterr().err == "no teams defined\n"
