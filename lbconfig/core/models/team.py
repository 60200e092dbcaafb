"""
Team models — the input records of the load-balancer config generator.

A ``TeamsConfig`` is the whole input: the ordered team list plus the
settings shared by every rendered server block. Every settings default
matches the production layout, so a bare list of teams is enough.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TeamEntry(BaseModel):
    """One team → UDP port mapping.

    The port is both the local bind port and the port the static
    discovery targets listen on.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    port: int
    team: str
    is_true_health_check: bool = Field(default=False, alias="isTrueHealthCheck")

    @field_validator("port", mode="before")
    @classmethod
    def _port_is_integer(cls, value: Any) -> Any:
        # YAML `true` and `9091.0` would otherwise coerce to a port
        if isinstance(value, (bool, float)):
            raise ValueError(f"port must be an integer, got {value!r}")
        return value

    @field_validator("is_true_health_check", mode="before")
    @classmethod
    def _empty_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class ApiSettings(BaseModel):
    """The ``[api]`` preamble."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    bind: str = ":9290"


class DiscoverySettings(BaseModel):
    """Static discovery targets. Each host is paired with the team port."""

    model_config = ConfigDict(frozen=True)

    kind: str = "static"
    hosts: tuple[str, ...] = ("as-logstash-00", "as-logstash-01")


class HealthcheckSettings(BaseModel):
    """Exec health check shared by all servers."""

    model_config = ConfigDict(frozen=True)

    kind: str = "exec"
    interval: str = "30s"
    timeout: str = "5s"
    true_script: str = "hc.sh"
    cache_script: str = "cache-hc.sh"
    expected_positive_output: str = "1"
    expected_negative_output: str = "0"


class TeamsConfig(BaseModel):
    """Root input — loaded from teams.yml or the built-in catalog."""

    api: ApiSettings = Field(default_factory=ApiSettings)
    discovery: DiscoverySettings = Field(default_factory=DiscoverySettings)
    healthcheck: HealthcheckSettings = Field(default_factory=HealthcheckSettings)
    teams: list[TeamEntry] = Field(default_factory=list)
