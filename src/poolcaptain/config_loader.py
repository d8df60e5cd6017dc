"""Persist and load CLI roster column profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from poolcaptain.config import resolve_game_type
from poolcaptain.ingest import DEFAULT_ROSTER_MAPPING


@dataclass
class MappingProfile:
    """Roster CSV column overrides plus an optional default game type."""

    roster_mapping: Dict[str, str]
    game_type: Optional[str] = None

    def __post_init__(self) -> None:
        unknown = sorted(set(self.roster_mapping) - set(DEFAULT_ROSTER_MAPPING))
        if unknown:
            raise ValueError(f"Unknown roster columns in profile: {', '.join(unknown)}")
        if self.game_type is not None:
            self.game_type = resolve_game_type(self.game_type)

    @classmethod
    def load(cls, path: Path) -> "MappingProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            roster_mapping=data.get("roster_mapping", {}),
            game_type=data.get("game_type"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "roster_mapping": self.roster_mapping,
            "game_type": self.game_type,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
