"""CSV export helpers for generated lineups."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Mapping

from poolcaptain.generator import GenerationResult

EXPORT_HEADERS = (
    "variant",
    "lineup_id",
    "skill_total",
    "high_skill_count",
    "fallback",
    "player_ids",
    "player_names",
    "skills",
)


def export_results_to_csv(results: Mapping[str, GenerationResult]) -> str:
    """One row per lineup, variants in the order they were generated."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)
    for variant, result in results.items():
        for lineup in result.lineups:
            writer.writerow([
                variant,
                lineup.lineup_id,
                lineup.skill_total,
                lineup.high_skill_count,
                "yes" if lineup.fallback else "no",
                " ".join(player.id for player in lineup.players),
                "|".join(player.name for player in lineup.players),
                " ".join(str(player.skill(variant)) for player in lineup.players),
            ])
    return buffer.getvalue()


__all__ = ["EXPORT_HEADERS", "export_results_to_csv"]
