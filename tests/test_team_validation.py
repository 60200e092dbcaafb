"""
Tests for team list validation.
"""

import pytest

from lbconfig.core.data import load_default_teams
from lbconfig.core.models import TeamEntry
from lbconfig.core.services.team_validation import (
    ValidationError,
    find_problems,
    validate_teams,
)


class TestFindProblems:
    def test_valid_list(self, two_teams):
        assert find_problems(two_teams) == []

    def test_empty_list(self):
        assert find_problems([]) == []

    def test_builtin_catalog_is_valid(self):
        assert find_problems(load_default_teams().teams) == []

    def test_empty_team_name(self):
        problems = find_problems([TeamEntry(port=9090, team="")])
        assert problems == ["entry 0: team name is empty"]

    def test_whitespace_team_name(self):
        problems = find_problems([TeamEntry(port=9090, team="   ")])
        assert len(problems) == 1
        assert "empty" in problems[0]

    @pytest.mark.parametrize("port", [0, -1, 65536, 100000])
    def test_port_out_of_range(self, port: int):
        problems = find_problems([TeamEntry(port=port, team="t")])
        assert len(problems) == 1
        assert "outside 1-65535" in problems[0]

    @pytest.mark.parametrize("port", [1, 65535])
    def test_port_bounds_accepted(self, port: int):
        assert find_problems([TeamEntry(port=port, team="t")]) == []

    def test_duplicate_team(self):
        problems = find_problems([
            TeamEntry(port=9090, team="fwsu"),
            TeamEntry(port=9091, team="fwsu"),
        ])
        assert problems == ["entry 1 (fwsu): duplicate team name (first at entry 0)"]

    def test_duplicate_port(self):
        problems = find_problems([
            TeamEntry(port=9090, team="fwsu"),
            TeamEntry(port=9090, team="calidad"),
        ])
        assert problems == ["entry 1 (calidad): port 9090 already used by 'fwsu'"]

    def test_problems_in_input_order(self):
        problems = find_problems([
            TeamEntry(port=0, team="a"),
            TeamEntry(port=9090, team=""),
        ])
        assert problems[0].startswith("entry 0")
        assert problems[1].startswith("entry 1")


class TestValidateTeams:
    def test_valid_passes(self, two_teams):
        validate_teams(two_teams)

    def test_raises_with_all_problems(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_teams([
                TeamEntry(port=70000, team=""),
                TeamEntry(port=9090, team="a"),
                TeamEntry(port=9090, team="a"),
            ])
        err = exc_info.value
        assert len(err.problems) == 4
        assert "team name is empty" in str(err)
