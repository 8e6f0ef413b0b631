"""Input adapters that normalize raw roster exports."""

from .roster import (
    DEFAULT_ROSTER_MAPPING,
    SIDEARM_ROSTER_MAPPING,
    RosterRow,
    abbreviate_position,
    load_players,
    load_roster_csv,
    load_roster_json,
    rows_to_players,
    year_to_number,
    year_to_text,
)

__all__ = [
    "DEFAULT_ROSTER_MAPPING",
    "SIDEARM_ROSTER_MAPPING",
    "RosterRow",
    "abbreviate_position",
    "load_players",
    "load_roster_csv",
    "load_roster_json",
    "rows_to_players",
    "year_to_number",
    "year_to_text",
]
