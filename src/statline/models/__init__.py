"""Canonical models shared across parsing, reconciliation and display."""

from .athlete import BLANK_CAT_STAT, CatStat, MatchedAthlete
from .roster import RosterPlayer
from .stats import (
    STAT_RECORD_LIST,
    BaseballRecord,
    BasketballRecord,
    BattingLine,
    DefenseLine,
    FootballRecord,
    KickingLine,
    PassingLine,
    PitchingLine,
    PuntingLine,
    ReceivingLine,
    ReturnsLine,
    RushingLine,
    SoccerFieldLine,
    SoccerGoalieLine,
    SoccerRecord,
    StatRecord,
    VolleyballRecord,
)

__all__ = [
    "BLANK_CAT_STAT",
    "BaseballRecord",
    "BasketballRecord",
    "BattingLine",
    "CatStat",
    "DefenseLine",
    "FootballRecord",
    "KickingLine",
    "MatchedAthlete",
    "PassingLine",
    "PitchingLine",
    "PuntingLine",
    "ReceivingLine",
    "ReturnsLine",
    "RosterPlayer",
    "RushingLine",
    "STAT_RECORD_LIST",
    "SoccerFieldLine",
    "SoccerGoalieLine",
    "SoccerRecord",
    "StatRecord",
    "VolleyballRecord",
]
