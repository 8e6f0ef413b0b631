"""Column range tables for each calibrated stat-sheet document family."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class ColumnRange:
    field: str
    x_min: float
    x_max: float

    def contains(self, x: float) -> bool:
        return self.x_min <= x < self.x_max


@dataclass(frozen=True)
class ColumnLayout:
    """Ordered ``[x_min, x_max)`` ranges calibrated for one document revision.

    ``round_x`` compares rounded token positions, which is how the Sidearm
    tables were measured. ``merge_gap`` and ``breaks`` only apply to fused
    token documents, where adjacent runs are glued back together before the
    regions are read.
    """

    key: str
    revision: str
    columns: Tuple[ColumnRange, ...]
    round_x: bool = True
    merge_gap: float | None = None
    breaks: Tuple[float, ...] = ()

    def column(self, name: str) -> ColumnRange:
        for column in self.columns:
            if column.field == name:
                return column
        raise KeyError(f"Layout {self.key} has no column '{name}'")

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(column.field for column in self.columns)

    @classmethod
    def load(cls, path: Path) -> "ColumnLayout":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            key=data["key"],
            revision=data.get("revision", "custom"),
            columns=tuple(ColumnRange(c["field"], float(c["x_min"]), float(c["x_max"])) for c in data["columns"]),
            round_x=bool(data.get("round_x", True)),
            merge_gap=data.get("merge_gap"),
            breaks=tuple(float(b) for b in data.get("breaks", ())),
        )

    def save(self, path: Path) -> None:
        payload = {
            "key": self.key,
            "revision": self.revision,
            "round_x": self.round_x,
            "merge_gap": self.merge_gap,
            "breaks": list(self.breaks),
            "columns": [
                {"field": c.field, "x_min": c.x_min, "x_max": c.x_max} for c in self.columns
            ],
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _ranges(*entries: Tuple[str, float, float]) -> Tuple[ColumnRange, ...]:
    return tuple(ColumnRange(name, lo, hi) for name, lo, hi in entries)


_LAYOUTS: Dict[str, ColumnLayout] = {
    "sidearm-basketball": ColumnLayout(
        key="sidearm-basketball",
        revision="2024",
        columns=_ranges(
            ("jersey", 15, 33),
            ("name", 33, 121),
            ("gp_gs", 121, 149),
            ("minutes", 149, 171),
            ("min_avg", 171, 199),
            ("fg_fga", 199, 235),
            ("fg_pct", 235, 259),
            ("three_fga", 259, 293),
            ("three_pct", 293, 319),
            ("ft_fta", 315, 349),
            ("ft_pct", 349, 373),
            ("off_reb", 373, 393),
            ("def_reb", 393, 413),
            ("tot_reb", 413, 433),
            ("reb_avg", 433, 453),
            ("pf", 453, 469),
            ("dq", 469, 485),
            ("ast", 485, 503),
            ("to", 503, 519),
            ("blk", 519, 536),
            ("stl", 536, 555),
            ("pts", 555, 576),
            ("pts_avg", 576, 601),
        ),
    ),
    "sidearm-soccer-player": ColumnLayout(
        key="sidearm-soccer-player",
        revision="2024",
        columns=_ranges(
            ("jersey", 215, 236),
            ("name", 236, 339),
            ("gp", 330, 351),
            ("g", 351, 371),
            ("a", 368, 386),
            ("pts", 384, 409),
            ("sh", 407, 431),
            ("sh_pct", 429, 463),
            ("sog", 460, 485),
            ("sog_pct", 483, 519),
            ("yc_rc", 517, 547),
            ("gw", 545, 569),
            ("pk_att", 567, 601),
        ),
    ),
    "sidearm-soccer-goalie": ColumnLayout(
        key="sidearm-soccer-goalie",
        revision="2024",
        columns=_ranges(
            ("jersey", 215, 236),
            ("name", 236, 339),
            ("gp", 330, 351),
            ("minutes", 350, 401),
            ("ga", 398, 421),
            ("gaa", 418, 449),
            ("saves", 446, 481),
            ("save_pct", 478, 521),
            ("wlt", 518, 561),
            ("sho", 558, 601),
        ),
    ),
    "sidearm-volleyball": ColumnLayout(
        key="sidearm-volleyball",
        revision="2024",
        columns=_ranges(
            ("jersey", 15, 33),
            ("name", 33, 113),
            ("sp", 113, 126),
            ("k", 126, 156),
            ("k_per_set", 156, 181),
            ("e", 181, 201),
            ("ta", 201, 226),
            ("pct", 226, 256),
            ("a", 256, 276),
            ("a_per_set", 276, 306),
            ("sa", 306, 326),
            ("se", 326, 346),
            ("sa_per_set", 346, 371),
            ("re", 371, 386),
            ("dig", 386, 409),
            ("dig_per_set", 409, 439),
            ("bs", 439, 459),
            ("ba", 459, 479),
            ("blk", 479, 501),
            ("blk_per_set", 501, 531),
            ("be", 531, 549),
            ("bhe", 549, 569),
            ("pts", 569, 601),
        ),
    ),
    "fused-baseball-batting": ColumnLayout(
        key="fused-baseball-batting",
        revision="2025",
        round_x=False,
        merge_gap=5.0,
        breaks=(525.0,),
        columns=_ranges(
            ("name", 0, 120),
            ("ab", 190, 210),
            ("r_h_xb", 210, 295),
            ("rbi_tb", 295, 355),
            ("bb", 355, 376),
            ("hp", 376, 392),
            ("so", 394, 414),
            ("gdp", 414, 458),
            ("sf", 458, 472),
            ("sh", 472, 494),
            ("sb_att", 494, 525),
        ),
    ),
    "fused-baseball-pitching": ColumnLayout(
        key="fused-baseball-pitching",
        revision="2025",
        round_x=False,
        merge_gap=5.0,
        columns=_ranges(
            ("name", 0, 120),
            ("era", 120, 152),
            ("w_l", 152, 180),
            ("app", 180, 198),
            ("gs", 198, 215),
            ("cg", 215, 238),
            ("sho", 238, 255),
            ("sv", 255, 275),
            ("ip_run", 275, 355),
            ("bb", 355, 373),
            ("so", 373, 393),
            ("hr", 455, 470),
            ("hp", 518, 540),
        ),
    ),
}


def iter_layouts() -> Iterable[ColumnLayout]:
    return _LAYOUTS.values()


def get_layout(key: str) -> ColumnLayout:
    try:
        return _LAYOUTS[key]
    except KeyError as exc:
        raise KeyError(f"Unknown column layout '{key}'") from exc
