"""
Built-in data catalogs.

The default team catalog lives in ``catalogs/teams.json`` and is used
whenever no teams.yml is found or given.

Usage::

    from lbconfig.core.data import load_default_teams

    config = load_default_teams()   # TeamsConfig with the 20 built-in teams
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from lbconfig.core.models.team import TeamEntry, TeamsConfig

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent

DEFAULT_TEAMS_CATALOG = "catalogs/teams.json"


def _load_json(relative_path: str) -> list | dict:
    """Load a JSON file relative to the data directory."""
    path = _DATA_DIR / relative_path
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_default_teams() -> TeamsConfig:
    """Build a TeamsConfig from the built-in team catalog."""
    data = _load_json(DEFAULT_TEAMS_CATALOG)
    teams = [TeamEntry.model_validate(item) for item in data]
    logger.debug("Loaded %d built-in team definitions", len(teams))
    return TeamsConfig(teams=teams)
