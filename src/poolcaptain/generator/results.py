"""Result containers returned by the lineup generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Tuple

from poolcaptain.models import LineupMember

AdvisoryKind = Literal["shortage", "reschedule", "too-many-required", "empty", "pool-too-large"]

# Kinds that stop a variant from producing any lineups.
FATAL_KINDS = frozenset({"too-many-required", "pool-too-large"})


@dataclass(frozen=True)
class Advisory:
    kind: AdvisoryKind
    message: str

    @property
    def fatal(self) -> bool:
        return self.kind in FATAL_KINDS

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class Lineup:
    lineup_id: str
    variant: str
    players: Tuple[LineupMember, ...]
    skill_total: int
    high_skill_count: int
    fallback: bool = False

    @property
    def player_ids(self) -> Tuple[str, ...]:
        return tuple(player.id for player in self.players)

    @property
    def placeholder_count(self) -> int:
        return sum(1 for player in self.players if player.kind == "placeholder")

    def to_dict(self) -> dict[str, Any]:
        return {
            "lineup_id": self.lineup_id,
            "variant": self.variant,
            "skill_total": self.skill_total,
            "high_skill_count": self.high_skill_count,
            "fallback": self.fallback,
            "players": [
                {
                    "id": player.id,
                    "name": player.name,
                    "kind": player.kind,
                    "skill": player.skill(self.variant),
                }
                for player in self.players
            ],
        }


@dataclass(frozen=True)
class GenerationResult:
    variant: str
    lineups: Tuple[Lineup, ...] = ()
    advisories: Tuple[Advisory, ...] = ()

    @property
    def error(self) -> Optional[Advisory]:
        """First fatal advisory, if generation was refused."""

        for advisory in self.advisories:
            if advisory.fatal:
                return advisory
        return None

    def advisory_kinds(self) -> Tuple[str, ...]:
        return tuple(advisory.kind for advisory in self.advisories)

    def to_dict(self) -> dict[str, Any]:
        return {
            "variant": self.variant,
            "lineups": [lineup.to_dict() for lineup in self.lineups],
            "advisories": [advisory.to_dict() for advisory in self.advisories],
        }
