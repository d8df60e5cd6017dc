"""Ghost/makeup player synthesis for short-handed rosters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from poolcaptain.generator.results import Advisory
from poolcaptain.models import PlaceholderPlayer

logger = logging.getLogger(__name__)

# A shortage this large makes forfeits likely; suggest moving the match.
RESCHEDULE_SHORTAGE = 2


@dataclass(frozen=True)
class PlaceholderFill:
    shortage: int
    placeholders: Tuple[PlaceholderPlayer, ...]
    advisories: Tuple[Advisory, ...]


def inject_placeholders(available_count: int, variant: str, lineup_size: int = 5) -> PlaceholderFill:
    """Create one placeholder per missing lineup seat."""

    shortage = max(0, lineup_size - available_count)
    placeholders = tuple(PlaceholderPlayer(variant=variant, index=i) for i in range(shortage))

    advisories: list[Advisory] = []
    if shortage > 0:
        advisories.append(
            Advisory(
                kind="shortage",
                message=(
                    f"Only {available_count} players available for {variant}. "
                    "Ghost/Makeup players will be added."
                ),
            )
        )
        logger.warning("%s roster short by %d; adding placeholders", variant, shortage)
    if shortage >= RESCHEDULE_SHORTAGE:
        advisories.append(
            Advisory(
                kind="reschedule",
                message=(
                    f"Your team is short {shortage} players. Consider rescheduling this week's "
                    "match and contacting the other team's captain."
                ),
            )
        )

    return PlaceholderFill(shortage=shortage, placeholders=placeholders, advisories=tuple(advisories))
