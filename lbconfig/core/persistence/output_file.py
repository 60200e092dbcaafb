"""
Output persistence — write the generated config.

File writes are atomic (write to temp file, then rename) so a crash
never leaves a half-written config where the load balancer reads it.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


class OutputWriteError(Exception):
    """Raised when the generated config cannot be written."""


def write_output(text: str, path: Path) -> None:
    """Write text to a file (atomic write).

    Args:
        text: Full file content.
        path: Target path. Parent directories are created.

    Raises:
        OutputWriteError: If any step of the write fails.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=".lbconfig_",
            suffix=".tmp",
        )
        os.close(fd)
        tmp = Path(tmp_path)
        try:
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error("Failed to write config to %s: %s", path, e)
        raise OutputWriteError(f"Cannot write {path}: {e}") from e

    logger.debug("Config written to %s (%d bytes)", path, len(text))


def emit(text: str, stream: TextIO) -> None:
    """Write text to an open stream (usually stdout) and flush it.

    Raises:
        OutputWriteError: If the stream write fails.
    """
    try:
        stream.write(text)
        stream.flush()
    except OSError as e:
        logger.error("Failed to write config to output stream: %s", e)
        raise OutputWriteError(f"Cannot write output: {e}") from e
