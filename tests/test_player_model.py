import pytest
from pydantic import ValidationError

from poolcaptain.models import PlaceholderPlayer, Player, Team, VariantProfile


def test_player_is_frozen():
    player = Player(id="p1", name="Test Player", skill8=5, skill9=4)

    assert player.id == "p1"
    assert player.skill("8-Ball") == 5

    with pytest.raises((TypeError, ValidationError)):
        player.absent = True  # type: ignore[misc]


def test_flat_fields_fold_into_profiles():
    player = Player(id="p1", name="Flat", skill8=6, required9=True)

    assert player.profiles["8-Ball"] == VariantProfile(skill=6, required=False)
    assert player.profiles["9-Ball"] == VariantProfile(skill=None, required=True)
    assert player.is_required("9-Ball")
    assert not player.is_required("8-Ball")


def test_camel_case_team_file_fields_are_accepted():
    player = Player.model_validate(
        {
            "id": "1700000000000",
            "name": "Legacy",
            "skillLevel8Ball": 4,
            "skillLevel9Ball": 3,
            "required8Ball": True,
            "required9Ball": False,
            "absent": False,
        }
    )

    assert player.skill("8-Ball") == 4
    assert player.skill("9-Ball") == 3
    assert player.is_required("8-Ball")


def test_unrated_player_counts_as_zero():
    player = Player(id="p1", name="New Member")

    assert player.skill("8-Ball") == 0
    assert player.skill("9-Ball") == 0
    assert not player.is_required("8-Ball")


def test_profile_keys_are_normalized_and_validated():
    player = Player(id="p1", name="Alias", profiles={"8ball": {"skill": 3}})
    assert player.skill("8-Ball") == 3

    with pytest.raises(ValidationError):
        Player(id="p2", name="Bad", profiles={"snooker": {"skill": 3}})


def test_negative_skill_rejected():
    with pytest.raises(ValidationError):
        Player(id="p1", name="Negative", skill8=-1)


def test_with_profile_returns_copy():
    player = Player(id="p1", name="Pinned", skill8=5)
    pinned = player.with_profile("8-Ball", required=True)

    assert pinned.is_required("8-Ball")
    assert pinned.skill("8-Ball") == 5
    assert not player.is_required("8-Ball")


def test_placeholder_is_unrated_and_never_pinned():
    ghost = PlaceholderPlayer(variant="9-Ball", index=1)

    assert ghost.id == "ghost-9-Ball-1"
    assert ghost.name == "Ghost/Makeup Player 2"
    assert ghost.skill("9-Ball") == 0
    assert not ghost.is_required("9-Ball")
    assert not ghost.absent
    assert ghost.kind == "placeholder"


def test_team_accepts_game_type_aliases():
    team = Team.model_validate({"name": "Cue Crew", "gameType": "dj", "players": []})
    assert team.game_type == "Double-Jeopardy"

    with pytest.raises(ValidationError):
        Team(name="Bad", game_type="Snooker")


def test_team_player_lookup():
    team = Team(name="Cue Crew", players=[Player(id="a", name="Ann")])

    assert team.player("a").name == "Ann"
    with pytest.raises(KeyError):
        team.player("zzz")
