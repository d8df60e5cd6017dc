"""Lineup planning for pool-league team captains."""

from poolcaptain.generator import Advisory, GenerationResult, Lineup, generate, generate_team, generate_variant
from poolcaptain.models import PlaceholderPlayer, Player, Team, VariantProfile
from poolcaptain.session import RosterSession

__all__ = [
    "Advisory",
    "GenerationResult",
    "Lineup",
    "PlaceholderPlayer",
    "Player",
    "RosterSession",
    "Team",
    "VariantProfile",
    "generate",
    "generate_team",
    "generate_variant",
]
