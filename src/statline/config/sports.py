"""Sport definitions shared by parsers, pipeline and API layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from statline.errors import UnsupportedSport


@dataclass(frozen=True)
class Sport:
    key: str
    name: str
    family: str
    document_families: Tuple[str, ...]
    supports_wmt: bool
    summary_columns: int
    min_text_length: int = 0


_SPORTS: Dict[str, Sport] = {
    "baseball": Sport(
        key="baseball",
        name="Baseball",
        family="baseball",
        document_families=("sidearm", "fused"),
        supports_wmt=True,
        summary_columns=0,
        min_text_length=100,
    ),
    "softball": Sport(
        key="softball",
        name="Softball",
        family="baseball",
        document_families=("sidearm", "fused"),
        supports_wmt=True,
        summary_columns=0,
        min_text_length=100,
    ),
    "mens-basketball": Sport(
        key="mens-basketball",
        name="Men's Basketball",
        family="basketball",
        document_families=("sidearm",),
        supports_wmt=True,
        summary_columns=3,
    ),
    "womens-basketball": Sport(
        key="womens-basketball",
        name="Women's Basketball",
        family="basketball",
        document_families=("sidearm",),
        supports_wmt=True,
        summary_columns=3,
    ),
    "mens-soccer": Sport(
        key="mens-soccer",
        name="Men's Soccer",
        family="soccer",
        document_families=("sidearm",),
        supports_wmt=False,
        summary_columns=3,
    ),
    "womens-soccer": Sport(
        key="womens-soccer",
        name="Women's Soccer",
        family="soccer",
        document_families=("sidearm",),
        supports_wmt=False,
        summary_columns=3,
    ),
    "womens-volleyball": Sport(
        key="womens-volleyball",
        name="Women's Volleyball",
        family="volleyball",
        document_families=("sidearm",),
        supports_wmt=True,
        summary_columns=3,
    ),
    "football": Sport(
        key="football",
        name="Football",
        family="football",
        document_families=("sidearm",),
        supports_wmt=False,
        summary_columns=5,
    ),
}


def iter_sports() -> Iterable[Sport]:
    return _SPORTS.values()


def get_sport(key: str) -> Sport:
    normalized = key.strip().lower().replace("_", "-").replace(" ", "-")
    try:
        return _SPORTS[normalized]
    except KeyError as exc:
        raise UnsupportedSport(key) from exc
