"""Reconciled athlete and summary-stat models."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel
from pydantic.config import ConfigDict

from .roster import RosterPlayer
from .stats import StatRecord


class MatchedAthlete(BaseModel):
    """A roster entry paired with the stat record it matched, if any."""

    roster: RosterPlayer
    stats: Optional[StatRecord] = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_stats(self) -> bool:
        return self.stats is not None and self.stats.has_stats()


class CatStat(BaseModel):
    """A ``(label, value)`` pair picked for the compact summary view."""

    label: str = ""
    value: Union[int, float, str] = ""

    model_config = ConfigDict(frozen=True)

    @property
    def is_blank(self) -> bool:
        return not self.label or self.value == ""


BLANK_CAT_STAT = CatStat()
