"""Helpers shared by the per-sport CAT stat selectors."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from statline.models import BLANK_CAT_STAT, CatStat

Number = Union[int, float]

_DASHES = re.compile("[–—]")
_DASH_VALUES = ("-", "–", "—")


def pad(stats: Sequence[CatStat], count: int) -> List[CatStat]:
    """Trim or pad ``stats`` with blank entries to exactly ``count`` columns."""

    picked = list(stats[:count])
    picked.extend(BLANK_CAT_STAT for _ in range(count - len(picked)))
    return picked


def first_positive(candidates: Iterable[Tuple[str, Optional[Number]]], count: int) -> List[CatStat]:
    """Keep the first ``count`` candidates whose value is above zero, in order."""

    picked: List[CatStat] = []
    for label, value in candidates:
        if value is not None and value > 0:
            picked.append(CatStat(label=label, value=value))
            if len(picked) >= count:
                break
    return pad(picked, count)


def format_cat_value(stat: CatStat) -> str:
    """Render a stat as ``"VALUE LABEL"``; blank and dash-only stats render empty."""

    if stat.is_blank or stat.value in _DASH_VALUES:
        return ""
    return f"{_DASHES.sub('-', str(stat.value))} {stat.label}"
