"""Roster models shared by ingestion, matching and display layers."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RosterPlayer(BaseModel):
    """One athlete as published on the team roster."""

    number: str = ""
    first_name: str = ""
    last_name: str = Field(..., min_length=1)
    position: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    year: Optional[str] = None
    hometown: Optional[str] = None
    state: Optional[str] = None
    bats: Optional[str] = None
    throws: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
