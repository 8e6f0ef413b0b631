"""Per-sport parsers that turn extracted documents into stat records."""

from .baseball import parse_baseball_text
from .basketball import parse_basketball_rows
from .common import DocumentInfo, ParseResult, parse_team_info
from .football import parse_football_text
from .fused_baseball import parse_fused_rows
from .soccer import parse_soccer_rows
from .volleyball import parse_volleyball_rows
from .wmt import fetch_payload, fetch_team_id, records_from_payload, resolve_team_id

__all__ = [
    "DocumentInfo",
    "ParseResult",
    "fetch_payload",
    "fetch_team_id",
    "parse_baseball_text",
    "parse_basketball_rows",
    "parse_football_text",
    "parse_fused_rows",
    "parse_soccer_rows",
    "parse_team_info",
    "parse_volleyball_rows",
    "records_from_payload",
    "resolve_team_id",
]
