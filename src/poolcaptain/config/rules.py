"""Lineup rules and game-type vocabulary for supported match formats."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Dict, Iterable, Literal, Tuple

logger = logging.getLogger(__name__)

Variant = Literal["8-Ball", "9-Ball"]
GameType = Literal["8-Ball", "9-Ball", "Double-Jeopardy"]

EIGHT_BALL: Variant = "8-Ball"
NINE_BALL: Variant = "9-Ball"
DOUBLE_JEOPARDY: GameType = "Double-Jeopardy"

VARIANTS: Tuple[Variant, ...] = (EIGHT_BALL, NINE_BALL)
GAME_TYPES: Tuple[GameType, ...] = (EIGHT_BALL, NINE_BALL, DOUBLE_JEOPARDY)

_MAX_OPTIONAL_POOL_ENV = "POOLCAPTAIN_MAX_OPTIONAL_POOL"
_MAX_OPTIONAL_POOL_DEFAULT = 32


@dataclass(frozen=True)
class LineupRules:
    variant: Variant
    lineup_size: int
    skill_cap: int
    high_skill_threshold: int
    max_high_skill: int
    max_required: int
    max_optional_pool: int
    # rating scale accepted when loading rosters
    min_skill: int
    max_skill: int


_LINEUP_RULES: Dict[str, LineupRules] = {
    EIGHT_BALL: LineupRules(
        variant=EIGHT_BALL,
        lineup_size=5,
        skill_cap=23,
        high_skill_threshold=6,
        max_high_skill=2,
        max_required=5,
        max_optional_pool=_MAX_OPTIONAL_POOL_DEFAULT,
        min_skill=2,
        max_skill=7,
    ),
    NINE_BALL: LineupRules(
        variant=NINE_BALL,
        lineup_size=5,
        skill_cap=23,
        high_skill_threshold=6,
        max_high_skill=2,
        max_required=5,
        max_optional_pool=_MAX_OPTIONAL_POOL_DEFAULT,
        min_skill=1,
        max_skill=9,
    ),
}

_GAME_TYPE_ALIASES: Dict[str, GameType] = {
    "8": EIGHT_BALL,
    "8-BALL": EIGHT_BALL,
    "8BALL": EIGHT_BALL,
    "8 BALL": EIGHT_BALL,
    "9": NINE_BALL,
    "9-BALL": NINE_BALL,
    "9BALL": NINE_BALL,
    "9 BALL": NINE_BALL,
    "DJ": DOUBLE_JEOPARDY,
    "DOUBLE-JEOPARDY": DOUBLE_JEOPARDY,
    "DOUBLE JEOPARDY": DOUBLE_JEOPARDY,
    "DOUBLEJEOPARDY": DOUBLE_JEOPARDY,
}

_GAME_TYPE_VARIANTS: Dict[str, Tuple[Variant, ...]] = {
    EIGHT_BALL: (EIGHT_BALL,),
    NINE_BALL: (NINE_BALL,),
    DOUBLE_JEOPARDY: (EIGHT_BALL, NINE_BALL),
}


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def resolve_game_type(value: str) -> GameType:
    """Normalize a game type label, raising KeyError for unknown values."""

    key = value.strip().upper()
    if key not in _GAME_TYPE_ALIASES:
        raise KeyError(f"Unsupported game type {value!r}")
    return _GAME_TYPE_ALIASES[key]


def resolve_variant(value: str) -> Variant:
    game_type = resolve_game_type(value)
    if game_type == DOUBLE_JEOPARDY:
        raise KeyError(f"{value!r} is a game type, not a single variant")
    return game_type


def variants_for(game_type: str) -> Tuple[Variant, ...]:
    """Return the variants that must be generated for a game type."""

    return _GAME_TYPE_VARIANTS[resolve_game_type(game_type)]


def iter_rules() -> Iterable[LineupRules]:
    """Return an iterator of all configured rule sets."""

    return _LINEUP_RULES.values()


def get_rules(variant: str) -> LineupRules:
    """Fetch rules for a variant with environment overrides applied."""

    rules = _LINEUP_RULES[resolve_variant(variant)]
    pool_limit = _env_int(
        _MAX_OPTIONAL_POOL_ENV,
        rules.max_optional_pool,
        min_value=rules.lineup_size,
    )
    if pool_limit != rules.max_optional_pool:
        rules = replace(rules, max_optional_pool=pool_limit)
    return rules
