"""Canonical roster models shared across ingestion, generation and sessions."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from poolcaptain.config import EIGHT_BALL, NINE_BALL, GameType, resolve_game_type, resolve_variant


class VariantProfile(BaseModel):
    """Skill level and lineup pin for one variant."""

    skill: Optional[int] = Field(default=None, ge=0)
    required: bool = False

    model_config = ConfigDict(frozen=True)


_UNRATED = VariantProfile()

# Flat field names used by roster exports and older team files.
_FLAT_FIELDS: Dict[str, tuple[str, str]] = {
    "skill8": (EIGHT_BALL, "skill"),
    "skill9": (NINE_BALL, "skill"),
    "required8": (EIGHT_BALL, "required"),
    "required9": (NINE_BALL, "required"),
    "skillLevel8Ball": (EIGHT_BALL, "skill"),
    "skillLevel9Ball": (NINE_BALL, "skill"),
    "required8Ball": (EIGHT_BALL, "required"),
    "required9Ball": (NINE_BALL, "required"),
}


class Player(BaseModel):
    """A real roster member. Generation only ever reads these."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    profiles: Dict[str, VariantProfile] = Field(default_factory=dict)
    absent: bool = False
    kind: Literal["player"] = "player"

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_fields(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        payload = dict(data)
        profiles: Dict[str, Any] = {}
        for key, value in (payload.get("profiles") or {}).items():
            if isinstance(value, VariantProfile):
                value = value.model_dump()
            profiles[key] = dict(value) if isinstance(value, Mapping) else value
        for field_name, (variant, attr) in _FLAT_FIELDS.items():
            if field_name not in payload:
                continue
            value = payload.pop(field_name)
            profiles.setdefault(variant, {})[attr] = value
        payload["profiles"] = profiles
        return payload

    @field_validator("profiles")
    @classmethod
    def _normalize_variants(cls, value: Dict[str, VariantProfile]) -> Dict[str, VariantProfile]:
        normalized: Dict[str, VariantProfile] = {}
        for key, profile in value.items():
            try:
                normalized[resolve_variant(key)] = profile
            except KeyError as exc:
                raise ValueError(f"Unknown variant {key!r}") from exc
        return normalized

    def profile(self, variant: str) -> VariantProfile:
        return self.profiles.get(variant, _UNRATED)

    def skill(self, variant: str) -> int:
        """Skill for arithmetic purposes; unrated counts as 0."""

        return self.profile(variant).skill or 0

    def is_required(self, variant: str) -> bool:
        return self.profile(variant).required

    def with_profile(self, variant: str, **changes: Any) -> "Player":
        """Return a copy with one variant's profile updated."""

        variant = resolve_variant(variant)
        profiles = dict(self.profiles)
        profiles[variant] = self.profile(variant).model_copy(update=changes)
        return self.model_copy(update={"profiles": profiles})


class PlaceholderPlayer(BaseModel):
    """Ghost/makeup stand-in synthesized for a short-handed roster.

    Placeholders have no skill, required or absent fields: they are always
    unrated, never pinned and always present.
    """

    variant: str
    index: int = Field(..., ge=0)
    kind: Literal["placeholder"] = "placeholder"

    model_config = ConfigDict(frozen=True)

    @property
    def id(self) -> str:
        return f"ghost-{self.variant}-{self.index}"

    @property
    def name(self) -> str:
        return f"Ghost/Makeup Player {self.index + 1}"

    @property
    def absent(self) -> bool:
        return False

    def profile(self, variant: str) -> VariantProfile:
        return _UNRATED

    def skill(self, variant: str) -> int:
        return 0

    def is_required(self, variant: str) -> bool:
        return False


LineupMember = Annotated[Union[Player, PlaceholderPlayer], Field(discriminator="kind")]


class Team(BaseModel):
    """Roster snapshot plus the selected game type."""

    id: str = Field(default_factory=lambda: uuid4().hex, min_length=1)
    name: str = ""
    players: List[Player] = Field(default_factory=list)
    game_type: GameType = Field(
        default=EIGHT_BALL,
        validation_alias=AliasChoices("game_type", "gameType"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("game_type", mode="before")
    @classmethod
    def _normalize_game_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return resolve_game_type(value)
            except KeyError as exc:
                raise ValueError(str(exc)) from exc
        return value

    def player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(f"No player with id {player_id!r} on team {self.name or self.id!r}")
