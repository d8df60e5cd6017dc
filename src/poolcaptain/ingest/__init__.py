"""Input adapters that normalize roster files."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    RosterLoadError,
    RosterRow,
    load_roster_csv,
    load_roster_rows,
    load_team,
    load_team_json,
    rows_to_players,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "RosterLoadError",
    "RosterRow",
    "load_roster_csv",
    "load_roster_rows",
    "load_team",
    "load_team_json",
    "rows_to_players",
]
