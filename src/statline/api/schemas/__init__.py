"""Pydantic models for API I/O."""

from .display import DisplayRequest, DisplayResponse, DisplayRowResponse, GapRowResponse
from .parse import DocumentInfoResponse, ParseResponse, WmtParseRequest
from .sports import SportResponse

__all__ = [
    "DisplayRequest",
    "DisplayResponse",
    "DisplayRowResponse",
    "DocumentInfoResponse",
    "GapRowResponse",
    "ParseResponse",
    "SportResponse",
    "WmtParseRequest",
]
