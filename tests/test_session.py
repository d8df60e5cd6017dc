import pytest

from poolcaptain.models import Player, Team
from poolcaptain.session import RosterSession


def _team(game_type: str = "8-Ball") -> Team:
    players = [
        Player(id="ann", name="Ann", skill8=7, skill9=6),
        Player(id="bob", name="Bob", skill8=6, skill9=7),
        Player(id="cal", name="Cal", skill8=5, skill9=5),
        Player(id="dee", name="Dee", skill8=4, skill9=3),
        Player(id="eve", name="Eve", skill8=3, skill9=4),
        Player(id="fay", name="Fay", skill8=2, skill9=2),
    ]
    return Team(id="t1", name="Cue Crew", players=players, game_type=game_type)


def test_results_are_cached_until_input_changes():
    session = RosterSession(_team())

    first = session.results
    assert session.results is first
    assert session.generation_count == 1

    session.set_absent("ann", True)
    assert session.stale
    second = session.results
    assert session.generation_count == 2
    assert [lineup.player_ids for lineup in second["8-Ball"].lineups] == [("bob", "cal", "dee", "eve", "fay")]


def test_required_toggle_pins_player():
    session = RosterSession(_team())
    session.set_required("fay", "8-Ball", True)

    lineups = session.results["8-Ball"].lineups
    assert lineups
    assert all("fay" in lineup.player_ids for lineup in lineups)
    assert not session.team.player("fay").is_required("9-Ball")


def test_on_update_receives_new_snapshots():
    seen: list[Team] = []
    original = _team()
    session = RosterSession(original, on_update=seen.append)

    session.set_game_type("dj")
    session.set_required("ann", "9-Ball", True)

    assert [team.game_type for team in seen] == ["Double-Jeopardy", "Double-Jeopardy"]
    assert seen[-1].player("ann").is_required("9-Ball")
    assert not original.player("ann").is_required("9-Ball")
    assert set(session.results) == {"8-Ball", "9-Ball"}


def test_game_type_change_regenerates_everything():
    session = RosterSession(_team("Double-Jeopardy"))
    assert set(session.results) == {"8-Ball", "9-Ball"}

    session.set_game_type("9-Ball")
    assert list(session.results) == ["9-Ball"]


def test_replace_players_invalidates():
    session = RosterSession(_team())
    session.results
    session.replace_players([Player(id="solo", name="Solo", skill8=4)])

    result = session.results["8-Ball"]
    assert result.advisory_kinds() == ("shortage", "reschedule")
    assert result.lineups[0].player_ids[0] == "solo"


def test_unknown_player_raises():
    session = RosterSession(_team())

    with pytest.raises(KeyError):
        session.set_absent("nobody", True)
    with pytest.raises(KeyError):
        session.set_required("ann", "Double-Jeopardy", True)
