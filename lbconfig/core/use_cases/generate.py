"""
Generate use case — load teams, validate, render, emit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from lbconfig.core.config.loader import ConfigError, resolve_config
from lbconfig.core.persistence.output_file import emit, write_output
from lbconfig.core.services.generators.gobetween import generate_config_file
from lbconfig.core.services.team_validation import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of a generate run."""

    ok: bool = False
    text: str = ""
    fmt: str = "toml"
    team_count: int = 0
    source: Path | None = None
    destination: Path | None = None
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "format": self.fmt,
            "team_count": self.team_count,
            "source": str(self.source) if self.source else "built-in",
            "destination": str(self.destination) if self.destination else None,
            "errors": self.errors,
        }


def generate_config(
    config_path: Path | None = None,
    *,
    validate: bool = True,
    fmt: str = "toml",
    output: Path | None = None,
    stream: TextIO | None = None,
) -> GenerateResult:
    """Generate the load-balancer config.

    Args:
        config_path: Optional explicit path to teams.yml.
        validate: Reject empty/duplicate names and bad or duplicate ports.
        fmt: ``toml`` or ``json``.
        output: Write the result to this file.
        stream: Write the result to this stream (ignored if ``output`` is set).

    Returns:
        GenerateResult. Config and validation problems land in ``errors``.

    Raises:
        OutputWriteError: If the final write fails.
    """
    result = GenerateResult(fmt=fmt)

    try:
        config, source = resolve_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.source = source
    result.team_count = len(config.teams)

    try:
        generated = generate_config_file(config, fmt=fmt, validate=validate)
    except ValidationError as e:
        result.errors.extend(e.problems)
        return result
    except ValueError as e:
        result.errors.append(str(e))
        return result

    result.text = generated.content
    logger.info("%s", generated.reason)

    if output is not None:
        write_output(result.text, output)
        result.destination = output
    elif stream is not None:
        emit(result.text, stream)

    result.ok = True
    return result
