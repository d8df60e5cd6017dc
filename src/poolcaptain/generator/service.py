"""Lineup generation pipeline: partition, fill, enumerate, rank."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Sequence

from poolcaptain.config import LineupRules, get_rules, resolve_variant, variants_for
from poolcaptain.generator.enumerator import Members, iter_valid_lineups, rank_by_skill
from poolcaptain.generator.partition import partition_roster
from poolcaptain.generator.placeholders import inject_placeholders
from poolcaptain.generator.results import Advisory, GenerationResult, Lineup
from poolcaptain.generator.skill import high_skill_count, skill_sum, sort_by_skill
from poolcaptain.models import PlaceholderPlayer, Player, Team

logger = logging.getLogger(__name__)


def _lineup_to_result(members: Members, idx: int, variant: str, rules: LineupRules, fallback: bool) -> Lineup:
    return Lineup(
        lineup_id=f"{variant}-L{idx + 1:03}",
        variant=variant,
        players=members,
        skill_total=skill_sum(members, variant),
        high_skill_count=high_skill_count(members, variant, rules.high_skill_threshold),
        fallback=fallback,
    )


def _fallback_lineup(
    available: Sequence[Player],
    placeholders: Sequence[PlaceholderPlayer],
    variant: str,
    rules: LineupRules,
) -> Members:
    """Everyone present plus enough placeholders to fill the table.

    Skill rules are not applied; this only exists when the roster is short.
    """

    seats = max(0, rules.lineup_size - len(available))
    members = list(available) + list(placeholders[:seats])
    return tuple(sort_by_skill(members, variant))


def generate_variant(
    roster: Iterable[Player],
    variant: str,
    *,
    rules: Optional[LineupRules] = None,
) -> GenerationResult:
    """Build every valid lineup for one variant.

    Problems are reported as advisories on the result rather than raised.
    """

    variant = resolve_variant(variant)
    rules = rules or get_rules(variant)
    roster = tuple(roster)

    partition = partition_roster(roster, variant)
    fill = inject_placeholders(partition.available_count, variant, rules.lineup_size)
    advisories = list(fill.advisories)

    # a lineup can never hold more pinned players than it has seats
    max_required = min(rules.max_required, rules.lineup_size)
    if len(partition.required) > max_required:
        advisories.append(
            Advisory(
                kind="too-many-required",
                message=(
                    "Too many required players. You have more than "
                    f"{max_required} required players for {variant}."
                ),
            )
        )
        logger.warning("%s: %d required players exceeds %d", variant, len(partition.required), max_required)
        return GenerationResult(variant=variant, advisories=tuple(advisories))

    optional = partition.optional + fill.placeholders
    if len(optional) > rules.max_optional_pool:
        advisories.append(
            Advisory(
                kind="pool-too-large",
                message=(
                    f"Too many optional players ({len(optional)}) for {variant}; "
                    f"the limit is {rules.max_optional_pool}."
                ),
            )
        )
        logger.warning("%s: optional pool of %d exceeds limit %d", variant, len(optional), rules.max_optional_pool)
        return GenerationResult(variant=variant, advisories=tuple(advisories))

    accepted = list(iter_valid_lineups(partition.required, optional, variant, rules))
    fallback = False
    if not accepted and fill.shortage > 0:
        accepted.append(_fallback_lineup(partition.available, fill.placeholders, variant, rules))
        fallback = True

    ranked = rank_by_skill(accepted, variant)
    lineups = tuple(
        _lineup_to_result(members, idx, variant, rules, fallback) for idx, members in enumerate(ranked)
    )
    if not lineups:
        advisories.append(Advisory(kind="empty", message=f"No valid {variant} combinations found."))

    logger.info(
        "Generated %d %s lineups (%d available, %d required, %d placeholders%s)",
        len(lineups),
        variant,
        partition.available_count,
        len(partition.required),
        fill.shortage,
        ", fallback" if fallback else "",
    )
    return GenerationResult(variant=variant, lineups=lineups, advisories=tuple(advisories))


def generate(
    roster: Iterable[Player],
    game_type: str,
    *,
    rules: Optional[Mapping[str, LineupRules]] = None,
) -> Dict[str, GenerationResult]:
    """Generate lineups for each variant the game type plays.

    Double-Jeopardy runs both variants independently over the same snapshot;
    a failure in one never affects the other.
    """

    snapshot = tuple(roster)
    overrides = {resolve_variant(key): value for key, value in (rules or {}).items()}
    return {
        variant: generate_variant(snapshot, variant, rules=overrides.get(variant))
        for variant in variants_for(game_type)
    }


def generate_team(team: Team, *, rules: Optional[Mapping[str, LineupRules]] = None) -> Dict[str, GenerationResult]:
    return generate(team.players, team.game_type, rules=rules)
