import pytest

from duorank.core.errors import RepeatedPlayer
from duorank.core.team import Team


def test_make_normalizes_order():
    team = Team.make(7, 3)
    assert team.early == 3
    assert team.late == 7
    assert team.players() == (3, 7)


def test_make_equal_players_fails():
    with pytest.raises(RepeatedPlayer, match="Repeated player: 5") as excinfo:
        Team.make(5, 5)
    assert excinfo.value.player_id == 5


def test_teams_with_same_players_are_equal():
    assert Team.make(1, 2) == Team.make(2, 1)
    assert len({Team.make(1, 2), Team.make(2, 1), Team.make(1, 3)}) == 2


def test_team_is_immutable():
    team = Team.make(1, 2)
    with pytest.raises(AttributeError):
        team.early = 4  # type: ignore[misc]
