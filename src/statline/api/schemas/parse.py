from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from statline.models import StatRecord


class DocumentInfoResponse(BaseModel):
    team_name: str | None = None
    record: str | None = None
    as_of: str | None = None


class ParseResponse(BaseModel):
    sport: str
    source: str
    records: list[StatRecord] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    info: DocumentInfoResponse | None = None


class WmtParseRequest(BaseModel):
    """Either an inline API payload, or a team id / stats URL to fetch one."""

    sport: str
    payload: dict[str, Any] | None = None
    team_id: str | None = None
    url: str | None = None

    @model_validator(mode="after")
    def _require_source(self) -> "WmtParseRequest":
        if self.payload is None and not self.team_id and not self.url:
            raise ValueError("one of payload, team_id or url is required")
        return self
