"""Score-ranked CAT stats for basketball.

Candidates are normalized to a roughly 0-15 scale so that rates and
percentages compete fairly:

* PPG, RPG, APG, BPG and SPG count as-is;
* FG% and 3-PT% are multiplied by 10 and FT% by 6.66;
* MPG only qualifies above 30 minutes a game and is divided by 10.

Equal scores fall back to a fixed priority (PPG first, MPG last).
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Optional

from statline.models import BasketballRecord, CatStat

from .common import pad

_PERCENT_LABELS = frozenset({"3-PT FG", "FG", "FT"})
_MPG_THRESHOLD = 30


class Candidate(NamedTuple):
    label: str
    display: str
    score: float
    priority: int


def _percent(value: float) -> str:
    return f"{math.floor(round(value * 100, 6))}%"


def _rate(value: float) -> str:
    return str(int(value)) if value % 1 == 0 else f"{value:.1f}"


def candidates(record: BasketballRecord) -> List[Candidate]:
    found: List[Candidate] = []
    games = record.gp or 0

    def per_game(label: str, total: Optional[int], priority: int) -> None:
        if games > 0 and total:
            value = total / games
            found.append(Candidate(label, _rate(value), value, priority))

    if record.pts_avg and record.pts_avg > 0:
        found.append(Candidate("PPG", f"{record.pts_avg:.1f}", record.pts_avg, 0))
    if record.three_pct and record.three_pct > 0:
        found.append(Candidate("3-PT FG", _percent(record.three_pct), record.three_pct * 10, 1))
    if record.fg_pct and record.fg_pct > 0:
        found.append(Candidate("FG", _percent(record.fg_pct), record.fg_pct * 10, 2))
    if record.ft_pct and record.ft_pct > 0:
        found.append(Candidate("FT", _percent(record.ft_pct), record.ft_pct * 6.66, 3))
    per_game("BPG", record.blk, 4)
    per_game("SPG", record.stl, 5)
    if record.reb_avg and record.reb_avg > 0:
        found.append(Candidate("RPG", f"{record.reb_avg:.1f}", record.reb_avg, 6))
    per_game("APG", record.ast, 7)
    if record.min_avg and record.min_avg > _MPG_THRESHOLD:
        found.append(Candidate("MPG", f"{record.min_avg:.1f}", record.min_avg / 10, 8))

    found.sort(key=lambda item: (-item.score, item.priority))
    return found


def basketball_cat_stats(record: BasketballRecord, count: int = 3) -> List[CatStat]:
    ranked = candidates(record)
    ppg = next((item for item in ranked if item.label == "PPG"), None)
    picked = ranked[:count]

    if ppg is not None and ppg in ranked[:3] and ppg not in picked and count > 0:
        picked = [ppg] + picked[: count - 1]

    if ppg is not None and picked and all(item.label in _PERCENT_LABELS for item in picked):
        picked[-1] = ppg

    if ppg is not None and ppg in picked:
        picked.remove(ppg)
        picked.insert(0, ppg)

    return pad([CatStat(label=item.label, value=item.display) for item in picked], count)
