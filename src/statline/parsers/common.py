"""Shared result types and value coercion for the sport parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from statline.models import StatRecord


_LEADING_INT = re.compile(r"^\s*(-?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*(-?\d*\.?\d+)")
_PAIR = re.compile(r"^\s*(\d+)\s*-\s*(\d+)")

_TEAM_NAME = re.compile(r"^\d{4}\s+(.+?)\s+(?:Baseball|Softball|Basketball|Soccer|Volleyball|Football)", re.MULTILINE)
_OVERALL_RECORD = re.compile(r"Overall Record:\s*([\d-]+)")
_AS_OF = re.compile(r"as of\s+([^)\n]+)", re.IGNORECASE)


@dataclass(frozen=True)
class DocumentInfo:
    team_name: Optional[str] = None
    record: Optional[str] = None
    as_of: Optional[str] = None


@dataclass(frozen=True)
class ParseResult:
    """Records recovered from one document plus non-fatal parse warnings."""

    records: List[StatRecord] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    info: Optional[DocumentInfo] = None

    @property
    def success(self) -> bool:
        return bool(self.records)


def to_int(value: Optional[str]) -> Optional[int]:
    """Read the leading integer of a cell (``"3-1"`` gives 3), else ``None``."""

    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def to_float(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    match = _LEADING_FLOAT.match(value.replace("%", ""))
    return float(match.group(1)) if match else None


def split_pair(value: Optional[str]) -> Tuple[Optional[int], Optional[int]]:
    """Split ``"12-15"`` style cells into two integers."""

    if not value:
        return None, None
    match = _PAIR.match(value)
    if not match:
        return None, None
    return int(match.group(1)), int(match.group(2))


def clean_name(value: str) -> str:
    name = re.sub(r"\s*,\s*", ", ", value.strip(), count=1)
    return re.sub(r"\s+", " ", name).strip(" ,")


def parse_team_info(text: str) -> DocumentInfo:
    """Read team name, overall record and as-of date from a stats header."""

    name = _TEAM_NAME.search(text)
    record = _OVERALL_RECORD.search(text)
    as_of = _AS_OF.search(text)
    return DocumentInfo(
        team_name=name.group(1).strip() if name else None,
        record=record.group(1) if record else None,
        as_of=as_of.group(1).strip() if as_of else None,
    )


RecordT = TypeVar("RecordT", bound=BaseModel)


class AthleteTable(Generic[RecordT]):
    """Owned table of records accumulated across document sections.

    Each distinct ``(jersey, name)`` pair gets a generated athlete id on
    first sight; later sections update that record in place of appending a
    duplicate.
    """

    def __init__(self, factory: Callable[..., RecordT]) -> None:
        self._factory = factory
        self._ids: Dict[Tuple[str, str], int] = {}
        self._records: Dict[int, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def upsert(self, jersey: str, name: str) -> int:
        key = (jersey, name)
        athlete_id = self._ids.get(key)
        if athlete_id is None:
            athlete_id = len(self._ids) + 1
            self._ids[key] = athlete_id
            self._records[athlete_id] = self._factory(jersey=jersey, name=name)
        return athlete_id

    def get(self, athlete_id: int) -> RecordT:
        return self._records[athlete_id]

    def update(self, athlete_id: int, **changes: object) -> RecordT:
        record = self._records[athlete_id].model_copy(update=changes)
        self._records[athlete_id] = record
        return record

    def records(self) -> List[RecordT]:
        return list(self._records.values())
