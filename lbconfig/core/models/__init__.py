"""
Domain models — Pydantic types for the config generator.

All models are re-exported here for convenient access:

    from lbconfig.core.models import TeamEntry, TeamsConfig, GeneratedFile
"""

from lbconfig.core.models.team import (
    ApiSettings,
    DiscoverySettings,
    HealthcheckSettings,
    TeamEntry,
    TeamsConfig,
)
from lbconfig.core.models.template import GeneratedFile

__all__ = [
    # team.py
    "ApiSettings",
    "DiscoverySettings",
    # template.py
    "GeneratedFile",
    "HealthcheckSettings",
    "TeamEntry",
    "TeamsConfig",
]
