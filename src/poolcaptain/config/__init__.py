"""Configuration helpers for game types and lineup rules."""

from .rules import (
    DOUBLE_JEOPARDY,
    EIGHT_BALL,
    GAME_TYPES,
    NINE_BALL,
    VARIANTS,
    GameType,
    LineupRules,
    Variant,
    get_rules,
    iter_rules,
    resolve_game_type,
    resolve_variant,
    variants_for,
)

__all__ = [
    "DOUBLE_JEOPARDY",
    "EIGHT_BALL",
    "GAME_TYPES",
    "NINE_BALL",
    "VARIANTS",
    "GameType",
    "LineupRules",
    "Variant",
    "get_rules",
    "iter_rules",
    "resolve_game_type",
    "resolve_variant",
    "variants_for",
]
