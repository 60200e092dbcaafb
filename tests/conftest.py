"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from lbconfig.core.models import TeamEntry


@pytest.fixture
def two_teams() -> list[TeamEntry]:
    """The first two entries of the production catalog."""
    return [
        TeamEntry(port=9090, team="fwsu", is_true_health_check=True),
        TeamEntry(port=9091, team="calidad"),
    ]


@pytest.fixture
def teams_yml(tmp_path: Path) -> Path:
    """Create a valid teams.yml in a temp directory."""
    content = textwrap.dedent("""\
        api:
          bind: ":9290"
        teams:
          - port: 9090
            team: fwsu
            isTrueHealthCheck: true
          - port: 9091
            team: calidad
    """)
    path = tmp_path / "teams.yml"
    path.write_text(content)
    return path


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory with no teams.yml above it."""
    isolated = tmp_path / "isolated"
    isolated.mkdir()
    monkeypatch.chdir(isolated)
    monkeypatch.setattr("lbconfig.core.config.loader.find_teams_file", lambda *a, **k: None)
    return isolated
