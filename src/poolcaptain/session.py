"""Roster session that regenerates lineups whenever its input changes."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

from poolcaptain.config import resolve_game_type, resolve_variant
from poolcaptain.generator import GenerationResult, generate_team
from poolcaptain.models import Player, Team

logger = logging.getLogger(__name__)

TeamListener = Callable[[Team], None]


class RosterSession:
    """Holds a team snapshot and the lineups generated from it.

    Every mutation swaps in a new ``Team`` snapshot, drops the cached results
    and notifies ``on_update``. Results are recomputed in full on the next
    read; nothing is patched incrementally.
    """

    def __init__(self, team: Team, on_update: Optional[TeamListener] = None):
        self._team = team
        self._on_update = on_update
        self._results: Optional[Dict[str, GenerationResult]] = None
        self.generation_count = 0

    @property
    def team(self) -> Team:
        return self._team

    @property
    def stale(self) -> bool:
        return self._results is None

    @property
    def results(self) -> Dict[str, GenerationResult]:
        if self._results is None:
            return self.regenerate()
        return self._results

    def regenerate(self) -> Dict[str, GenerationResult]:
        self._results = generate_team(self._team)
        self.generation_count += 1
        return self._results

    def _replace_team(self, team: Team) -> None:
        self._team = team
        self._results = None
        if self._on_update is not None:
            self._on_update(team)

    def _update_player(self, player_id: str, updated: Player) -> None:
        players = [updated if player.id == player_id else player for player in self._team.players]
        self._replace_team(self._team.model_copy(update={"players": players}))

    def set_required(self, player_id: str, variant: str, value: bool) -> None:
        player = self._team.player(player_id)
        self._update_player(player_id, player.with_profile(resolve_variant(variant), required=value))

    def set_absent(self, player_id: str, value: bool) -> None:
        player = self._team.player(player_id)
        self._update_player(player_id, player.model_copy(update={"absent": value}))

    def set_game_type(self, game_type: str) -> None:
        resolved = resolve_game_type(game_type)
        logger.info("Game type for %s set to %s", self._team.name or self._team.id, resolved)
        self._replace_team(self._team.model_copy(update={"game_type": resolved}))

    def replace_players(self, players: Iterable[Player]) -> None:
        self._replace_team(self._team.model_copy(update={"players": list(players)}))
