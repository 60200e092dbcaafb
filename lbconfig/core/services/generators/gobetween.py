"""
Load-balancer config generator — one UDP server block per team.

Renders the TOML consumed by the gobetween load balancer: an ``[api]``
preamble followed by a ``[servers.<team>]`` section (with ``udp``,
``discovery`` and ``healthcheck`` sub-tables) for every team, in input
order. The same layout can also be emitted as JSON.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from lbconfig.core.models.team import (
    ApiSettings,
    HealthcheckSettings,
    TeamEntry,
    TeamsConfig,
)
from lbconfig.core.models.template import GeneratedFile
from lbconfig.core.services.team_validation import validate_teams

logger = logging.getLogger(__name__)


# ── Templates ───────────────────────────────────────────────────

# Fields are substituted in a single str.format pass, so a value that
# happens to contain "{port}" is emitted literally.

_API_TEMPLATE = """\
[api]
enabled = {enabled}
bind = "{bind}"
"""

_SERVER_TEMPLATE = """\
[servers.{team}]
 bind = "0.0.0.0:{port}"
 protocol = "udp"
 balance = "roundrobin"
 backend_idle_timeout="0"
 client_idle_timeout="0"

[servers.{team}.udp]
 max_requests = 1
 max_responses = 0

[servers.{team}.discovery]
 kind = "{discovery_kind}"
 static_list = [
{static_list}
 ]

[servers.{team}.healthcheck]
 interval = "{interval}"
 kind = "{healthcheck_kind}"
 exec_command = "./{script_name}"
 exec_expected_positive_output = "{positive_output}"
 exec_expected_negative_output = "{negative_output}"
 timeout = "{timeout}"\
"""

_STATIC_TARGET_TEMPLATE = '  "{host}:{port}"'

# One blank line between consecutive blocks
_BLOCK_SEPARATOR = "\n\n"

_FORMATS = ("toml", "json")


# ── Rendering helpers ───────────────────────────────────────────


def script_name(entry: TeamEntry, healthcheck: HealthcheckSettings | None = None) -> str:
    """Health-check script for a team: the true check or the cached one."""
    hc = healthcheck or HealthcheckSettings()
    return hc.true_script if entry.is_true_health_check else hc.cache_script


def render_api(api: ApiSettings | None = None) -> str:
    """Render the ``[api]`` preamble (ends with a single newline)."""
    api = api or ApiSettings()
    return _API_TEMPLATE.format(enabled=str(api.enabled).lower(), bind=api.bind)


def _static_targets(entry: TeamEntry, settings: TeamsConfig) -> list[str]:
    return [f"{host}:{entry.port:d}" for host in settings.discovery.hosts]


def render_team_block(entry: TeamEntry, settings: TeamsConfig | None = None) -> str:
    """Render the server sections for one team (no trailing newline)."""
    settings = settings or TeamsConfig()
    hc = settings.healthcheck

    static_list = ",\n".join(
        _STATIC_TARGET_TEMPLATE.format(host=host, port=entry.port)
        for host in settings.discovery.hosts
    )

    return _SERVER_TEMPLATE.format(
        team=entry.team,
        port=f"{entry.port:d}",
        discovery_kind=settings.discovery.kind,
        static_list=static_list,
        interval=hc.interval,
        healthcheck_kind=hc.kind,
        script_name=script_name(entry, hc),
        positive_output=hc.expected_positive_output,
        negative_output=hc.expected_negative_output,
        timeout=hc.timeout,
    )


# ── Public API ──────────────────────────────────────────────────


def generate(
    entries: Sequence[TeamEntry],
    settings: TeamsConfig | None = None,
    *,
    validate: bool = False,
) -> str:
    """Render the full TOML config for the given teams.

    Args:
        entries: Teams in output order.
        settings: Shared api/discovery/healthcheck settings. Its own
            ``teams`` list is ignored; ``entries`` is what gets rendered.
        validate: Run ``validate_teams`` first.

    Returns:
        The preamble, then one block per entry. With no entries the
        result is exactly the preamble.

    Raises:
        ValidationError: If ``validate`` is set and the list is invalid.
    """
    settings = settings or TeamsConfig()

    if validate:
        validate_teams(entries)

    preamble = render_api(settings.api)
    blocks = [render_team_block(entry, settings) for entry in entries]
    logger.debug("Rendered %d server blocks", len(blocks))

    if not blocks:
        return preamble

    # preamble already ends with "\n"; one more gives the blank line
    return preamble + "\n" + _BLOCK_SEPARATOR.join(blocks) + "\n"


def render_json(
    entries: Sequence[TeamEntry],
    settings: TeamsConfig | None = None,
    *,
    validate: bool = False,
) -> str:
    """Render the same configuration as a JSON document.

    Servers are keyed by team name, so a repeated name keeps only its
    last entry.
    """
    settings = settings or TeamsConfig()

    if validate:
        validate_teams(entries)

    hc = settings.healthcheck
    servers: dict[str, dict] = {}
    for entry in entries:
        servers[entry.team] = {
            "bind": f"0.0.0.0:{entry.port:d}",
            "protocol": "udp",
            "balance": "roundrobin",
            "backend_idle_timeout": "0",
            "client_idle_timeout": "0",
            "udp": {"max_requests": 1, "max_responses": 0},
            "discovery": {
                "kind": settings.discovery.kind,
                "static_list": _static_targets(entry, settings),
            },
            "healthcheck": {
                "interval": hc.interval,
                "kind": hc.kind,
                "exec_command": f"./{script_name(entry, hc)}",
                "exec_expected_positive_output": hc.expected_positive_output,
                "exec_expected_negative_output": hc.expected_negative_output,
                "timeout": hc.timeout,
            },
        }

    doc = {
        "api": {"enabled": settings.api.enabled, "bind": settings.api.bind},
        "servers": servers,
    }
    return json.dumps(doc, indent=2) + "\n"


def generate_config_file(
    config: TeamsConfig,
    *,
    output_path: str | None = None,
    fmt: str = "toml",
    validate: bool = False,
) -> GeneratedFile:
    """Render a TeamsConfig into a GeneratedFile.

    Args:
        config: Teams and shared settings.
        output_path: Relative path for the file (default: gobetween.<fmt>).
        fmt: ``toml`` or ``json``.
        validate: Run ``validate_teams`` first.

    Raises:
        ValueError: Unknown format.
        ValidationError: If ``validate`` is set and the list is invalid.
    """
    if fmt not in _FORMATS:
        raise ValueError(f"Unknown format {fmt!r} (expected one of: {', '.join(_FORMATS)})")

    if fmt == "json":
        content = render_json(config.teams, config, validate=validate)
    else:
        content = generate(config.teams, config, validate=validate)

    return GeneratedFile(
        path=output_path or f"gobetween.{fmt}",
        content=content,
        reason=f"Generated {fmt} config for {len(config.teams)} team(s)",
    )


def supported_formats() -> list[str]:
    """Return output formats the generator can emit."""
    return sorted(_FORMATS)
