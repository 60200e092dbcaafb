"""
Config check use case — validate the team list and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lbconfig.core.config.loader import ConfigError, resolve_config
from lbconfig.core.models.team import TeamsConfig
from lbconfig.core.services.team_validation import find_problems


@dataclass
class ConfigCheckResult:
    """Result of team configuration validation."""

    valid: bool = False
    config: TeamsConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "team_count": len(self.config.teams) if self.config else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the team configuration and report issues.

    Args:
        config_path: Optional explicit path to teams.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    try:
        config, source = resolve_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.config = config
    result.config_path = source

    if source is None:
        result.warnings.append("No teams.yml found. Using the built-in team catalog.")

    if not config.teams:
        result.warnings.append("No teams defined. Only the [api] section will be generated.")

    if not config.discovery.hosts:
        result.warnings.append("No discovery hosts defined. Servers will have no backends.")

    result.errors.extend(find_problems(config.teams))

    result.valid = len(result.errors) == 0
    return result
