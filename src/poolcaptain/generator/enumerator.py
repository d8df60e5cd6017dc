"""Exhaustive search for lineups that satisfy the skill rules."""

from __future__ import annotations

from itertools import combinations
from typing import Iterator, List, Sequence, Tuple

from poolcaptain.config import LineupRules
from poolcaptain.generator.skill import high_skill_count, skill_sum, sort_by_skill
from poolcaptain.models import LineupMember

Members = Tuple[LineupMember, ...]


def satisfies_rules(members: Sequence[LineupMember], variant: str, rules: LineupRules) -> bool:
    if skill_sum(members, variant) > rules.skill_cap:
        return False
    return high_skill_count(members, variant, rules.high_skill_threshold) <= rules.max_high_skill


def iter_valid_lineups(
    required: Sequence[LineupMember],
    optional: Sequence[LineupMember],
    variant: str,
    rules: LineupRules,
) -> Iterator[Members]:
    """Yield accepted lineups in discovery order.

    Subsets of ``optional`` are walked as index-increasing combinations, so
    discovery order is lexicographic over optional-pool positions. Each yielded
    lineup is the chosen subset followed by the required players, then sorted
    by descending skill.
    """

    seats = rules.lineup_size - len(required)
    if seats < 0:
        raise ValueError(
            f"{len(required)} required players cannot fit a lineup of {rules.lineup_size}"
        )
    for subset in combinations(optional, seats):
        members = subset + tuple(required)
        if satisfies_rules(members, variant, rules):
            yield tuple(sort_by_skill(members, variant))


def rank_by_skill(lineups: Sequence[Members], variant: str) -> List[Members]:
    """Highest total skill first; equal totals keep discovery order."""

    return sorted(lineups, key=lambda members: skill_sum(members, variant), reverse=True)
