"""Roster reconciliation: matching, slot assignment and display rows."""

from .display import DisplayItem, GapRow, collapse_gaps
from .matching import (
    MatchReport,
    exact_name_match,
    extract_first_name,
    extract_last_name,
    loose_name_match,
    match_by_surname,
    match_players,
    normalize_name,
)
from .slots import SlotAssignment, SlotRow, assign_slots

__all__ = [
    "DisplayItem",
    "GapRow",
    "MatchReport",
    "SlotAssignment",
    "SlotRow",
    "assign_slots",
    "collapse_gaps",
    "exact_name_match",
    "extract_first_name",
    "extract_last_name",
    "loose_name_match",
    "match_by_surname",
    "match_players",
    "normalize_name",
]
