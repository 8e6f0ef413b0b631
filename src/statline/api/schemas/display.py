from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from statline.models import CatStat, RosterPlayer, StatRecord


class DisplayRequest(BaseModel):
    sport: str
    roster: list[RosterPlayer]
    records: list[StatRecord] = Field(default_factory=list)
    min_gap: int | None = Field(default=None, ge=1)


class DisplayRowResponse(BaseModel):
    type: Literal["row"] = "row"
    slot: int
    display_jersey: str
    player: RosterPlayer | None = None
    has_stats: bool = False
    cat_stats: list[CatStat] = Field(default_factory=list)
    formatted: list[str] = Field(default_factory=list)


class GapRowResponse(BaseModel):
    type: Literal["gap"] = "gap"
    count: int
    start_row: int


class DisplayResponse(BaseModel):
    sport: str
    items: list[DisplayRowResponse | GapRowResponse]
    inactive: list[RosterPlayer] = Field(default_factory=list)
    unmatched_names: list[str] = Field(default_factory=list)
    matched_count: int = 0
