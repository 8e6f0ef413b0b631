"""End-to-end runs: document or payload in, display rows out.

Every function here is a pure function of its inputs; nothing is cached or
persisted between calls.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from statline.config.settings import Settings
from statline.config.sports import Sport, get_sport
from statline.models import CatStat, MatchedAthlete, RosterPlayer, StatRecord
from statline.parsers import (
    ParseResult,
    parse_baseball_text,
    parse_basketball_rows,
    parse_football_text,
    parse_fused_rows,
    parse_soccer_rows,
    parse_team_info,
    parse_volleyball_rows,
    records_from_payload,
)
from statline.pdf.layout import Row, extract_pages, is_pdf, rows_to_text
from statline.reconcile import GapRow, SlotRow, assign_slots, collapse_gaps, match_players
from statline.summary import cat_stats_for


logger = logging.getLogger(__name__)


def _flatten(pages: Sequence[Sequence[Row]]) -> List[Row]:
    return [row for page in pages for row in page]


def _parse_sidearm(sport: Sport, pages: List[List[Row]]) -> ParseResult:
    if sport.family == "baseball":
        return parse_baseball_text(rows_to_text(_flatten(pages)))
    if sport.family == "basketball":
        return parse_basketball_rows(pages[0])
    if sport.family == "volleyball":
        return parse_volleyball_rows(pages[0])
    if sport.family == "soccer":
        return parse_soccer_rows(_flatten(pages))
    if sport.family == "football":
        return parse_football_text(rows_to_text(_flatten(pages)))
    raise ValueError(f"No document parser for {sport.key}")


_FAMILY_PARSERS: Dict[str, Callable[[Sport, List[List[Row]]], ParseResult]] = {
    "sidearm": _parse_sidearm,
    "fused": lambda sport, pages: parse_fused_rows(_flatten(pages)),
}


def parse_document(
    sport: str,
    data: bytes,
    family: str = "sidearm",
    *,
    settings: Optional[Settings] = None,
) -> ParseResult:
    """Parse a stats PDF for ``sport`` laid out in the given document family.

    Unreadable documents give an empty result with a warning rather than an
    exception; an unknown sport or family raises.
    """

    definition = get_sport(sport)
    if family not in definition.document_families:
        raise ValueError(
            f"{definition.name} documents come in {', '.join(definition.document_families)} layouts, not {family}"
        )
    settings = settings or Settings.from_env()
    if not is_pdf(data):
        return ParseResult(warnings=["Document is not a PDF"])
    pages = extract_pages(data, settings.row_tolerance)
    if not pages or not any(pages):
        return ParseResult(warnings=["No text rows could be extracted from the document"])

    result = _FAMILY_PARSERS[family](definition, pages)
    if result.info is None:
        result = dataclasses.replace(result, info=parse_team_info(rows_to_text(pages[0])))
    logger.info(
        "Parsed %s record(s) from %s %s document (%s warning(s))",
        len(result.records),
        family,
        definition.key,
        len(result.warnings),
    )
    return result


def parse_payload(sport: str, payload: Mapping[str, Any]) -> ParseResult:
    definition = get_sport(sport)
    if not definition.supports_wmt:
        raise ValueError(f"{definition.name} is not available from the WMT API")
    return records_from_payload(definition.key, payload)


@dataclass(frozen=True)
class DisplayRow:
    slot: int
    display_jersey: str
    athlete: Optional[MatchedAthlete] = None
    cat_stats: List[CatStat] = field(default_factory=list)

    @property
    def has_stats(self) -> bool:
        return self.athlete is not None and self.athlete.has_stats


@dataclass(frozen=True)
class DisplayReport:
    sport: str
    items: List[Union[DisplayRow, GapRow]]
    inactive: List[MatchedAthlete]
    unmatched_names: List[str]
    matched_count: int

    @property
    def rows(self) -> List[DisplayRow]:
        return [item for item in self.items if isinstance(item, DisplayRow)]

    @property
    def gaps(self) -> List[GapRow]:
        return [item for item in self.items if isinstance(item, GapRow)]


def _has_stats(row: SlotRow) -> bool:
    return row.athlete is not None and row.athlete.has_stats


def build_display(
    sport: str,
    roster: Sequence[RosterPlayer],
    records: Sequence[StatRecord],
    *,
    min_gap: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> DisplayReport:
    """Match, slot and summarize ``roster`` against ``records``.

    Football only counts slots whose athlete has stats as filled; every
    other sport counts any rostered athlete.
    """

    definition = get_sport(sport)
    if min_gap is None:
        min_gap = (settings or Settings.from_env()).gap_min
    report = match_players(roster, records)
    assignment = assign_slots(report.athletes)
    is_filled = _has_stats if definition.family == "football" else None

    items: List[Union[DisplayRow, GapRow]] = []
    for item in collapse_gaps(assignment.rows, min_gap=min_gap, is_filled=is_filled):
        if isinstance(item, GapRow):
            items.append(item)
            continue
        stats = item.athlete.stats if item.athlete is not None else None
        cat_stats = cat_stats_for(stats, definition.summary_columns) if stats is not None else []
        items.append(
            DisplayRow(
                slot=item.slot,
                display_jersey=item.display_jersey,
                athlete=item.athlete,
                cat_stats=cat_stats,
            )
        )

    return DisplayReport(
        sport=definition.key,
        items=items,
        inactive=assignment.inactive,
        unmatched_names=report.unmatched_names,
        matched_count=report.matched_count,
    )
