"""Per-sport selection of the few stats worth showing for an athlete."""

from __future__ import annotations

from typing import List, Optional

from statline.models import (
    BasketballRecord,
    CatStat,
    FootballRecord,
    SoccerRecord,
    StatRecord,
    VolleyballRecord,
)

from .basketball import basketball_cat_stats
from .common import format_cat_value, pad
from .football import Category, classify, football_cat_stats
from .soccer import soccer_cat_stats
from .volleyball import volleyball_cat_stats


def cat_stats_for(record: Optional[StatRecord], count: int) -> List[CatStat]:
    """Dispatch on the record's sport; missing records get blank columns."""

    if isinstance(record, BasketballRecord):
        return basketball_cat_stats(record, count)
    if isinstance(record, SoccerRecord):
        return soccer_cat_stats(record, count)
    if isinstance(record, VolleyballRecord):
        return volleyball_cat_stats(record, count)
    if isinstance(record, FootballRecord):
        return football_cat_stats(record, count)
    return pad([], count)


__all__ = [
    "Category",
    "basketball_cat_stats",
    "cat_stats_for",
    "classify",
    "football_cat_stats",
    "format_cat_value",
    "soccer_cat_stats",
    "volleyball_cat_stats",
]
