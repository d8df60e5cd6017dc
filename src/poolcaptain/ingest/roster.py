"""Helpers to load roster files and emit canonical team models."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from poolcaptain.config import EIGHT_BALL, NINE_BALL, VARIANTS, get_rules, resolve_game_type
from poolcaptain.models import Player, Team, VariantProfile


logger = logging.getLogger(__name__)


class RosterLoadError(ValueError):
    """Raised when a roster file cannot be turned into players."""


DEFAULT_ROSTER_MAPPING = {
    "player_id": "id",
    "name": "name",
    "skill8": "skill8",
    "skill9": "skill9",
    "required8": "required8",
    "required9": "required9",
    "absent": "absent",
}

_TRUE_TOKENS = {"1", "true", "t", "yes", "y", "x"}


class RosterRow(BaseModel):
    raw_id: Optional[str] = None
    raw_name: str
    raw_skill8: Optional[str] = None
    raw_skill9: Optional[str] = None
    raw_required8: Optional[str] = None
    raw_required9: Optional[str] = None
    raw_absent: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "RosterRow":
        def extract(key: str) -> Optional[str]:
            column = mapping.get(key, DEFAULT_ROSTER_MAPPING.get(key))
            if column is None:
                return None
            value = row.get(column)
            return value.strip() if value is not None else None

        return cls(
            raw_id=extract("player_id") or None,
            raw_name=extract("name") or "",
            raw_skill8=extract("skill8"),
            raw_skill9=extract("skill9"),
            raw_required8=extract("required8"),
            raw_required9=extract("required9"),
            raw_absent=extract("absent"),
        )


def _parse_flag(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUE_TOKENS


def _parse_skill(raw: Optional[str], *, line: int, column: str, variant: str) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        raise RosterLoadError(f"line {line}: {column} '{raw}' is not a whole number") from None
    rules = get_rules(variant)
    if not rules.min_skill <= value <= rules.max_skill:
        raise RosterLoadError(
            f"line {line}: {column} '{raw}' is outside the {variant} scale {rules.min_skill}-{rules.max_skill}"
        )
    return value


def _check_skill_scales(team: Team, source: Path) -> None:
    for player in team.players:
        for variant in VARIANTS:
            skill = player.profile(variant).skill
            if skill is None:
                continue
            rules = get_rules(variant)
            if not rules.min_skill <= skill <= rules.max_skill:
                raise RosterLoadError(
                    f"{source}: {player.name} has {variant} skill {skill}, "
                    f"outside the scale {rules.min_skill}-{rules.max_skill}"
                )


def load_roster_rows(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterRow]:
    mapping = mapping or DEFAULT_ROSTER_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        return [RosterRow.from_mapping(row, mapping) for row in reader]


def rows_to_players(rows: List[RosterRow]) -> List[Player]:
    players: List[Player] = []
    for idx, row in enumerate(rows, start=1):
        # header is line 1
        line = idx + 1
        if not row.raw_name:
            logger.warning("Skipping roster line %d without a player name", line)
            continue
        players.append(
            Player(
                id=row.raw_id or f"player-{idx}",
                name=row.raw_name,
                profiles={
                    EIGHT_BALL: VariantProfile(
                        skill=_parse_skill(row.raw_skill8, line=line, column="skill8", variant=EIGHT_BALL),
                        required=_parse_flag(row.raw_required8),
                    ),
                    NINE_BALL: VariantProfile(
                        skill=_parse_skill(row.raw_skill9, line=line, column="skill9", variant=NINE_BALL),
                        required=_parse_flag(row.raw_required9),
                    ),
                },
                absent=_parse_flag(row.raw_absent),
            )
        )
    return players


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[Player]:
    return rows_to_players(load_roster_rows(path, mapping=mapping))


def load_team_json(path: Path) -> Team:
    """Load a team document, or a bare JSON list of players."""

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RosterLoadError(f"{path}: invalid JSON ({exc})") from exc
    if isinstance(data, list):
        data = {"players": data}
    try:
        team = Team.model_validate(data)
    except ValidationError as exc:
        raise RosterLoadError(f"{path}: {exc}") from exc
    _check_skill_scales(team, path)
    return team


def load_team(
    path: Path,
    *,
    game_type: str | None = None,
    mapping: Mapping[str, str] | None = None,
) -> Team:
    """Load a roster by file extension, optionally overriding the game type."""

    suffix = path.suffix.lower()
    if suffix == ".json":
        team = load_team_json(path)
    elif suffix in {".csv", ".txt"}:
        team = Team(name=path.stem, players=load_roster_csv(path, mapping=mapping))
    else:
        raise RosterLoadError(f"Unsupported roster file type {path.suffix!r}")

    if game_type is not None:
        team = team.model_copy(update={"game_type": resolve_game_type(game_type)})
    logger.info("Loaded %d players from %s", len(team.players), path)
    return team
