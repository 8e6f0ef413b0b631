"""PDF layout reconstruction, column mapping and fused-digit splitting."""

from .columns import collect_regions, concat_regions, first_in_range, join_range, map_row, tokenize_row
from .layout import (
    PositionedToken,
    Row,
    extract_pages,
    extract_rows,
    extract_text,
    group_rows,
    is_pdf,
    rows_to_text,
)
from .splitter import (
    BattingRun,
    PitchingRun,
    extract_rbi,
    search_partitions,
    split_batting_run,
    split_innings,
    split_pitching_run,
    split_steals,
    total_bases,
)

__all__ = [
    "BattingRun",
    "PitchingRun",
    "PositionedToken",
    "Row",
    "collect_regions",
    "concat_regions",
    "extract_pages",
    "extract_rbi",
    "extract_rows",
    "extract_text",
    "first_in_range",
    "group_rows",
    "is_pdf",
    "join_range",
    "map_row",
    "rows_to_text",
    "search_partitions",
    "split_batting_run",
    "split_innings",
    "split_pitching_run",
    "split_steals",
    "tokenize_row",
    "total_bases",
]
