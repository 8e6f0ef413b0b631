"""Category classification and CAT stats for football."""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Tuple, Union

from statline.models import CatStat, FootballRecord

from .common import pad

_ZERO_LIKE = re.compile(r"^0([.\-/]0+)?$")
_DASH_VALUES = ("-", "–", "—")


class Category(str, Enum):
    PASSING = "Passing"
    RUSHING = "Rushing"
    RECEIVING = "Receiving"
    DEFENSE = "Defense"
    PUNTING = "Punting"
    KICKING = "Kicking"
    GENERAL = "General"


def _number(value: Union[int, float]) -> Union[int, float]:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def classify(record: FootballRecord) -> Tuple[Category, List[CatStat]]:
    """Pick the one category that best describes the athlete and its raw stats."""

    passing = record.passing
    rushing = record.rushing
    receiving = record.receiving
    rush_att = rushing.att if rushing else 0
    receptions = receiving.no if receiving else 0

    if passing and passing.att > 0 and (passing.att > 10 or passing.att > rush_att):
        return Category.PASSING, [
            CatStat(label="PCT", value=f"{passing.comp / passing.att * 100:.1f}%"),
            CatStat(label="YDS", value=passing.yds),
            CatStat(label="TD", value=passing.td),
            CatStat(label="INT", value=passing.interceptions),
        ]
    if rushing and rushing.att > 0 and rushing.att >= receptions:
        return Category.RUSHING, [
            CatStat(label="CAR", value=rushing.att),
            CatStat(label="YDS", value=rushing.net or rushing.gain),
            CatStat(label="AVG", value=_number(rushing.avg)),
            CatStat(label="TD", value=rushing.td),
        ]
    if receiving and receiving.no > 0:
        return Category.RECEIVING, [
            CatStat(label="REC", value=receiving.no),
            CatStat(label="YDS", value=receiving.yds),
            CatStat(label="AVG", value=_number(receiving.avg)),
            CatStat(label="TD", value=receiving.td),
        ]
    defense = record.defense
    if defense and defense.tot > 0:
        return Category.DEFENSE, [
            CatStat(label="TKLS", value=_number(defense.tot)),
            CatStat(label="TFL", value=defense.tfl or 0),
            CatStat(label="SACKS", value=defense.sacks or 0),
            CatStat(label="PBU", value=defense.pbu),
            CatStat(label="INT", value=defense.interceptions or 0),
        ]
    punting = record.punting
    if punting and punting.no > 0:
        return Category.PUNTING, [
            CatStat(label="PUNTS", value=punting.no),
            CatStat(label="AVG", value=_number(punting.avg)),
            CatStat(label="LONG", value=punting.long),
            CatStat(label="I20", value=punting.i20),
        ]
    kicking = record.kicking
    if kicking and kicking.fga > 0:
        return Category.KICKING, [
            CatStat(label="FG", value=f"{kicking.fgm}/{kicking.fga}"),
            CatStat(label="PCT", value=f"{_number(kicking.pct)}%"),
            CatStat(label="LONG", value=kicking.long),
            CatStat(label="PTS", value=kicking.pts),
        ]
    return Category.GENERAL, []


def _is_shown(stat: CatStat) -> bool:
    if stat.is_blank:
        return False
    text = str(stat.value).strip()
    if text in _DASH_VALUES:
        return False
    return not _ZERO_LIKE.match(text)


def football_cat_stats(record: FootballRecord, count: int = 5) -> List[CatStat]:
    _category, stats = classify(record)
    return pad([stat for stat in stats if _is_shown(stat)], count)
