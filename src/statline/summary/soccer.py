"""CAT stats for soccer field players and goalkeepers."""

from __future__ import annotations

from typing import List

from statline.models import CatStat, SoccerRecord

from .common import first_positive, pad


def soccer_cat_stats(record: SoccerRecord, count: int = 3) -> List[CatStat]:
    if record.goalie is not None:
        goalie = record.goalie
        fixed = [
            CatStat(label="Saves", value=goalie.saves if goalie.saves is not None else ""),
            CatStat(label="GA", value=goalie.ga if goalie.ga is not None else ""),
            CatStat(label="SHO", value=goalie.sho if goalie.sho is not None else ""),
        ]
        return pad(fixed, count)
    if record.outfield is None:
        return pad([], count)
    line = record.outfield
    return first_positive(
        [("Goals", line.g), ("Assists", line.a), ("Pts", line.pts), ("SOG", line.sog), ("SH", line.sh)],
        count,
    )
