"""
Configuration loader — reads teams.yml into domain models.

The team file is YAML, either a mapping::

    api:
      bind: ":9290"
    discovery:
      hosts: [as-logstash-00, as-logstash-01]
    teams:
      - {port: 9090, team: fwsu, isTrueHealthCheck: true}

or a bare list of team entries. ``${VAR}`` placeholders are replaced
with environment values before parsing.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

import yaml

from lbconfig.core.data import load_default_teams
from lbconfig.core.models.team import TeamsConfig

logger = logging.getLogger(__name__)

# Default config filename
TEAMS_CONFIG_FILE = "teams.yml"

_ENV_VAR_RE = re.compile(r"\$\{(.*?)\}")


class ConfigError(Exception):
    """Raised when the team configuration is invalid or missing."""


def find_teams_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest teams.yml in ``start_dir`` (default: cwd) or above it."""
    start = (start_dir or Path.cwd()).resolve()
    candidates = (directory / TEAMS_CONFIG_FILE for directory in (start, *start.parents))
    return next((c for c in candidates if c.is_file()), None)


def expand_env_vars(text: str) -> str:
    """Replace ``${NAME}`` with the value of NAME (empty if unset)."""
    return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), text)


def load_teams(path: Path | None = None) -> TeamsConfig:
    """Load and validate a team file.

    Args:
        path: Explicit path to teams.yml. If None, searches upward.

    Returns:
        Validated TeamsConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_teams_file()

    if path is None:
        raise ConfigError(f"No {TEAMS_CONFIG_FILE} found. Specify one with --config.")

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading team config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(expand_env_vars(raw))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}

    # A bare list is shorthand for {"teams": [...]}
    if isinstance(data, list):
        data = {"teams": data}

    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a YAML mapping or list in {path}, got {type(data).__name__}"
        )

    try:
        config = TeamsConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid team configuration: {e}") from e

    logger.info("Loaded %d teams from %s", len(config.teams), path)
    return config


def resolve_config(path: Path | None = None) -> tuple[TeamsConfig, Path | None]:
    """Pick the team config to use.

    An explicit path must load. Without one, a discovered teams.yml is
    used, falling back to the built-in catalog.

    Returns:
        (config, source path or None for the built-in catalog).
    """
    if path is None:
        path = find_teams_file()

    if path is None:
        logger.info("No %s found — using built-in team catalog", TEAMS_CONFIG_FILE)
        return load_default_teams(), None

    return load_teams(path), path
