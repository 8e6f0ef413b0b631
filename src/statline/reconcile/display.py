"""Collapse long runs of empty slots into single gap markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from .slots import SlotRow


@dataclass(frozen=True)
class GapRow:
    count: int
    start_row: int

    @property
    def end_row(self) -> int:
        return self.start_row + self.count - 1


DisplayItem = Union[SlotRow, GapRow]


def _is_occupied(row: SlotRow) -> bool:
    return row.athlete is not None


def collapse_gaps(
    rows: Sequence[SlotRow],
    min_gap: int = 5,
    is_filled: Optional[Callable[[SlotRow], bool]] = None,
) -> List[DisplayItem]:
    """Replace every run of at least ``min_gap`` unfilled rows with a ``GapRow``.

    ``is_filled`` decides which rows count as filled; by default a row is
    filled when an athlete sits in it. Shorter runs are kept row by row.
    """

    filled = is_filled or _is_occupied
    display: List[DisplayItem] = []
    pending: List[SlotRow] = []

    def flush() -> None:
        if len(pending) >= min_gap:
            display.append(GapRow(count=len(pending), start_row=pending[0].slot))
        else:
            display.extend(pending)
        pending.clear()

    for row in rows:
        if filled(row):
            flush()
            display.append(row)
        else:
            pending.append(row)
    flush()
    return display
