from __future__ import annotations

from pydantic import BaseModel


class SportResponse(BaseModel):
    key: str
    name: str
    family: str
    document_families: list[str]
    supports_wmt: bool
    summary_columns: int
