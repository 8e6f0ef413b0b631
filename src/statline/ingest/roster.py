"""Helpers to load roster exports and emit canonical ``RosterPlayer`` records."""

from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel

from statline.models import RosterPlayer


logger = logging.getLogger(__name__)

_POSITION_ABBREVIATIONS = {
    "guard": "G",
    "forward": "F",
    "center": "C",
    "point guard": "PG",
    "shooting guard": "SG",
    "small forward": "SF",
    "power forward": "PF",
    "setter": "S",
    "libero": "L",
    "outside hitter": "OH",
    "middle blocker": "MB",
    "opposite": "OPP",
    "defensive specialist": "DS",
    "right side hitter": "RS",
    "pitcher": "P",
    "catcher": "C",
    "infielder": "IF",
    "outfielder": "OF",
    "designated hitter": "DH",
    "utility": "UTL",
    "first base": "1B",
    "second base": "2B",
    "third base": "3B",
    "shortstop": "SS",
    "goalkeeper": "GK",
    "defender": "D",
    "midfielder": "MF",
    "quarterback": "QB",
    "running back": "RB",
    "wide receiver": "WR",
    "tight end": "TE",
    "linebacker": "LB",
    "defensive back": "DB",
    "kicker": "K",
    "punter": "P",
}

_YEAR_LABELS = {"1": "FR", "2": "SO", "3": "JR", "4": "SR"}
_HEIGHT_DASH = re.compile(r"^(\d+)-(\d+)$")
_LOCATION = re.compile(r"^(.+?),\s*([A-Za-z.]+)\.?$")


class RosterRow(BaseModel):
    raw_number: str = ""
    raw_name: str = ""
    raw_first_name: Optional[str] = None
    raw_last_name: Optional[str] = None
    raw_position: Optional[str] = None
    raw_height: Optional[str] = None
    raw_weight: Optional[str] = None
    raw_year: Optional[str] = None
    raw_hometown: Optional[str] = None
    raw_bats_throws: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], mapping: Mapping[str, str]) -> "RosterRow":
        def text(value: Any) -> Optional[str]:
            if value is None:
                return None
            return str(value).strip()

        def extract(spec: Optional[str | Sequence[str]], *, default: Optional[str] = None) -> Optional[str]:
            if spec is None:
                return default
            if isinstance(spec, str):
                value = text(row.get(spec))
                return value if value is not None else default
            parts = [text(row.get(col)) for col in spec if row.get(col) not in (None, "")]
            return " ".join(part for part in parts if part) if parts else default

        def parse_spec(key: str) -> Optional[str | Sequence[str]]:
            spec = mapping.get(key)
            if spec is None:
                return None
            if "|" in spec:
                return tuple(part.strip() for part in spec.split("|"))
            return spec

        data = {
            "raw_number": extract(parse_spec("number"), default=""),
            "raw_name": extract(parse_spec("name"), default=""),
            "raw_first_name": extract(parse_spec("first_name")),
            "raw_last_name": extract(parse_spec("last_name")),
            "raw_position": extract(parse_spec("position")),
            "raw_height": extract(parse_spec("height")),
            "raw_weight": extract(parse_spec("weight")),
            "raw_year": extract(parse_spec("year")),
            "raw_hometown": extract(parse_spec("hometown")),
            "raw_bats_throws": extract(parse_spec("bats_throws")),
        }
        return cls(**data)


DEFAULT_ROSTER_MAPPING = {
    "number": "number",
    "name": "name",
    "first_name": "first_name",
    "last_name": "last_name",
    "position": "position",
    "height": "height",
    "weight": "weight",
    "year": "year",
    "hometown": "hometown",
    "bats_throws": "bats_throws",
}

SIDEARM_ROSTER_MAPPING = {
    "number": "No.",
    "name": "Full Name",
    "position": "Pos.",
    "height": "Ht.",
    "weight": "Wt.",
    "year": "Academic Year",
    "hometown": "Hometown / High School",
    "bats_throws": "B/T",
}


def abbreviate_position(position: Optional[str]) -> str:
    """Shorten spelled-out positions ("Guard/Forward" gives "G/F")."""

    if not position:
        return ""
    position = position.strip()
    if "/" in position:
        return "/".join(abbreviate_position(part) for part in position.split("/"))
    if len(position) <= 3:
        return position
    return _POSITION_ABBREVIATIONS.get(position.lower(), position)


def year_to_number(year: Optional[str]) -> str:
    """Map class labels ("Freshman", "R-So.", "Gr.") onto "1" through "4"."""

    normalized = (year or "").strip().lower()
    if normalized.isdigit():
        return normalized
    if "fr" in normalized or "fy" in normalized:
        return "1"
    if "so" in normalized:
        return "2"
    if "jr" in normalized or "jun" in normalized:
        return "3"
    if "sr" in normalized or "sen" in normalized or "gr" in normalized:
        return "4"
    return ""


def year_to_text(year: Optional[str]) -> str:
    if not year:
        return ""
    number = year if year.strip().isdigit() else year_to_number(year)
    return _YEAR_LABELS.get(number.strip(), year)


def format_height(height: Optional[str]) -> str:
    if not height:
        return ""
    match = _HEIGHT_DASH.match(height.strip())
    if match:
        return f"{match.group(1)}'{match.group(2)}"
    return height.strip()


def split_name(full_name: str) -> Tuple[str, str]:
    """Split "Last, First" or "First Middle Last" into ``(first, last)``."""

    if "," in full_name:
        last, _, first = full_name.partition(",")
        return first.strip(), last.strip()
    parts = full_name.split()
    if not parts:
        return "", ""
    if len(parts) == 1:
        return "", parts[0]
    return " ".join(parts[:-1]), parts[-1]


def split_hometown(hometown: Optional[str]) -> Tuple[str, str]:
    """Return ``(city, state)`` from "City, St. / High School" cells."""

    if not hometown:
        return "", ""
    location = hometown.split("/", 1)[0].strip()
    match = _LOCATION.match(location)
    if not match:
        return location, ""
    return match.group(1).strip(), match.group(2).strip().replace(".", "")


def _split_bats_throws(value: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    if not value or "/" not in value:
        return None, None
    bats, _, throws = value.partition("/")
    return bats.strip() or None, throws.strip() or None


def rows_to_players(rows: Sequence[RosterRow]) -> List[RosterPlayer]:
    players: List[RosterPlayer] = []
    for row in rows:
        first, last = split_name(row.raw_name) if row.raw_name else ("", "")
        first = row.raw_first_name or first
        last = row.raw_last_name or last
        if not last and first:
            first, last = "", first
        if not last:
            logger.debug("Skipping roster row without a name: %s", row)
            continue
        city, state = split_hometown(row.raw_hometown)
        bats, throws = _split_bats_throws(row.raw_bats_throws)
        players.append(
            RosterPlayer(
                number=row.raw_number.lstrip("#").strip(),
                first_name=first,
                last_name=last,
                position=abbreviate_position(row.raw_position) or None,
                height=format_height(row.raw_height) or None,
                weight=row.raw_weight or None,
                year=year_to_number(row.raw_year) or None,
                hometown=f"{city}, {state}" if state else (city or None),
                state=state or None,
                bats=bats,
                throws=throws,
            )
        )
    return players


def load_roster_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterRow]:
    mapping = mapping or DEFAULT_ROSTER_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [RosterRow.from_mapping(row, mapping) for row in reader]
    return rows


def load_roster_json(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterRow]:
    """Read a JSON list of roster objects, or ``{"players": [...]}``."""

    mapping = mapping or DEFAULT_ROSTER_MAPPING
    with path.open(encoding="utf-8") as f:
        payload = json.load(f)
    if isinstance(payload, Mapping):
        payload = payload.get("players", [])
    if not isinstance(payload, list):
        raise ValueError(f"roster file {path} does not contain a list of players")
    return [RosterRow.from_mapping(item, mapping) for item in payload if isinstance(item, Mapping)]


def load_players(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterPlayer]:
    """Load a CSV or JSON roster file straight into ``RosterPlayer`` records."""

    if path.suffix.lower() == ".json":
        rows = load_roster_json(path, mapping=mapping)
    else:
        rows = load_roster_csv(path, mapping=mapping)
    return rows_to_players(rows)
