"""CAT stats for volleyball, picked from a fixed priority list."""

from __future__ import annotations

from typing import List

from statline.models import CatStat, VolleyballRecord

from .common import first_positive


def volleyball_cat_stats(record: VolleyballRecord, count: int = 3) -> List[CatStat]:
    return first_positive(
        [
            ("PTS", record.pts),
            ("Kills", record.k),
            ("Assists", record.a),
            ("Digs", record.dig),
            ("BLK", record.blk),
            ("SA", record.sa),
        ],
        count,
    )
