"""
Team list validation — opt-in checks for runtime-supplied entries.

The generator itself renders whatever it is given; duplicates simply
produce repeated sections. These checks are run by the CLI by default
and by ``generate(..., validate=True)``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lbconfig.core.models.team import TeamEntry

logger = logging.getLogger(__name__)

MIN_PORT = 1
MAX_PORT = 65535


class ValidationError(Exception):
    """Raised when a team list fails validation.

    Attributes:
        problems: Human-readable problem descriptions, in input order.
    """

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def find_problems(entries: Iterable[TeamEntry]) -> list[str]:
    """Return every problem in the team list (empty list if valid)."""
    problems: list[str] = []
    seen_teams: dict[str, int] = {}
    seen_ports: dict[int, str] = {}

    for index, entry in enumerate(entries):
        label = f"entry {index}"
        if not entry.team.strip():
            problems.append(f"{label}: team name is empty")
        else:
            label = f"{label} ({entry.team})"

        if not MIN_PORT <= entry.port <= MAX_PORT:
            problems.append(
                f"{label}: port {entry.port} outside {MIN_PORT}-{MAX_PORT}"
            )

        if entry.team.strip():
            if entry.team in seen_teams:
                problems.append(
                    f"{label}: duplicate team name (first at entry {seen_teams[entry.team]})"
                )
            else:
                seen_teams[entry.team] = index

        if entry.port in seen_ports:
            problems.append(
                f"{label}: port {entry.port} already used by {seen_ports[entry.port]!r}"
            )
        else:
            seen_ports[entry.port] = entry.team

    return problems


def validate_teams(entries: Iterable[TeamEntry]) -> None:
    """Raise ValidationError if the team list has any problem."""
    problems = find_problems(entries)
    if problems:
        logger.debug("Team validation failed: %d problem(s)", len(problems))
        raise ValidationError(problems)
