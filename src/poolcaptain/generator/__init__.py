"""Lineup generator: roster partitioning, placeholder fill and constrained search."""

from .partition import RosterPartition, partition_roster
from .placeholders import PlaceholderFill, inject_placeholders
from .results import Advisory, GenerationResult, Lineup
from .service import generate, generate_team, generate_variant

__all__ = [
    "Advisory",
    "GenerationResult",
    "Lineup",
    "PlaceholderFill",
    "RosterPartition",
    "generate",
    "generate_team",
    "generate_variant",
    "inject_placeholders",
    "partition_roster",
]
