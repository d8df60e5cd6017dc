"""Roster models."""

from .player import LineupMember, PlaceholderPlayer, Player, Team, VariantProfile

__all__ = ["LineupMember", "PlaceholderPlayer", "Player", "Team", "VariantProfile"]
