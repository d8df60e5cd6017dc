import pytest

from poolcaptain.config import get_rules, iter_rules, resolve_game_type, variants_for


def test_get_rules_handles_aliases():
    rules = get_rules("8ball")
    assert rules.variant == "8-Ball"
    assert rules.lineup_size == 5
    assert rules.skill_cap == 23
    assert rules.high_skill_threshold == 6
    assert rules.max_high_skill == 2


def test_iter_rules_covers_both_variants():
    assert {rules.variant for rules in iter_rules()} == {"8-Ball", "9-Ball"}


def test_double_jeopardy_runs_both_variants():
    assert variants_for("Double-Jeopardy") == ("8-Ball", "9-Ball")
    assert variants_for("9") == ("9-Ball",)
    assert resolve_game_type(" double jeopardy ") == "Double-Jeopardy"


def test_unknown_values_raise():
    with pytest.raises(KeyError):
        resolve_game_type("straight pool")
    with pytest.raises(KeyError):
        get_rules("Double-Jeopardy")


def test_optional_pool_env_override(monkeypatch):
    monkeypatch.setenv("POOLCAPTAIN_MAX_OPTIONAL_POOL", "12")
    assert get_rules("9-Ball").max_optional_pool == 12

    monkeypatch.setenv("POOLCAPTAIN_MAX_OPTIONAL_POOL", "1")
    assert get_rules("9-Ball").max_optional_pool == 5


def test_invalid_env_override_keeps_default(monkeypatch):
    monkeypatch.setenv("POOLCAPTAIN_MAX_OPTIONAL_POOL", "lots")
    assert get_rules("8-Ball").max_optional_pool == 32
