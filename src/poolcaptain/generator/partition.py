"""Split a roster into required and optional pools for one variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from poolcaptain.models import Player


@dataclass(frozen=True)
class RosterPartition:
    required: Tuple[Player, ...]
    optional: Tuple[Player, ...]
    absent: Tuple[Player, ...]
    # present players in roster order, required and optional interleaved
    available: Tuple[Player, ...]

    @property
    def available_count(self) -> int:
        return len(self.available)


def partition_roster(roster: Sequence[Player], variant: str) -> RosterPartition:
    """Stable partition of ``roster`` into required/optional/absent.

    Absent players never reach either pool, regardless of their pins.
    """

    required: list[Player] = []
    optional: list[Player] = []
    absent: list[Player] = []
    available: list[Player] = []
    for player in roster:
        if player.absent:
            absent.append(player)
            continue
        available.append(player)
        if player.is_required(variant):
            required.append(player)
        else:
            optional.append(player)
    return RosterPartition(
        required=tuple(required),
        optional=tuple(optional),
        absent=tuple(absent),
        available=tuple(available),
    )
