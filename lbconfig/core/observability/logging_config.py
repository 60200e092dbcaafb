"""
Logging configuration — set up once by the CLI group.

Every module logs through ``logging.getLogger(__name__)``. Logs go to
stderr so they never mix with the config printed on stdout.

Level precedence:
    CLI flag  >  LBCONFIG_LOG_LEVEL env var  >  WARNING (default)
"""

from __future__ import annotations

import logging
import sys

_FMT_PLAIN = "%(message)s"
_FMT_DETAILED = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Send log records at ``level`` and above to stderr.

    INFO and DEBUG records carry the level and logger name; quieter
    levels print bare messages.
    """
    numeric_level = parse_level(level)
    fmt = _FMT_DETAILED if numeric_level <= logging.INFO else _FMT_PLAIN

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
