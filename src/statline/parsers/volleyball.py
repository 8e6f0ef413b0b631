"""Volleyball season stats read column by column from a Sidearm sheet."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from statline.config.layouts import ColumnLayout, get_layout
from statline.jerseys import slot_sort_key
from statline.models import VolleyballRecord
from statline.pdf.columns import map_row
from statline.pdf.layout import Row

from .common import ParseResult, clean_name, to_float, to_int


logger = logging.getLogger(__name__)

_HEADER_MARKERS = ("Player", "SP", "PTS")
_EXCLUDED_NAMES = ("Total", "Opponents", "Team")
_TEAM_JERSEY = "TM"
# A wrapped name prints on its own short row just below the athlete's row.
_CONTINUATION_MAX_TOKENS = 5
_CONTINUATION_MAX_GAP = 15.0


def _is_header(row: Row) -> bool:
    texts = row.texts
    return all(marker in texts for marker in _HEADER_MARKERS)


def _record(jersey: str, name: str, fields: Dict[str, str]) -> VolleyballRecord:
    return VolleyballRecord(
        jersey=jersey,
        name=name,
        sp=to_int(fields["sp"]),
        k=to_int(fields["k"]),
        k_per_set=to_float(fields["k_per_set"]),
        e=to_int(fields["e"]),
        ta=to_int(fields["ta"]),
        pct=to_float(fields["pct"]),
        a=to_int(fields["a"]),
        a_per_set=to_float(fields["a_per_set"]),
        sa=to_int(fields["sa"]),
        se=to_int(fields["se"]),
        sa_per_set=to_float(fields["sa_per_set"]),
        re=to_int(fields["re"]),
        dig=to_int(fields["dig"]),
        dig_per_set=to_float(fields["dig_per_set"]),
        bs=to_int(fields["bs"]),
        ba=to_int(fields["ba"]),
        blk=to_float(fields["blk"]),
        blk_per_set=to_float(fields["blk_per_set"]),
        be=to_int(fields["be"]),
        bhe=to_int(fields["bhe"]),
        pts=to_float(fields["pts"]),
    )


def parse_volleyball_rows(rows: Sequence[Row], layout: Optional[ColumnLayout] = None) -> ParseResult:
    layout = layout or get_layout("sidearm-volleyball")
    header: Optional[Row] = None
    # (row y, jersey, name, fields) in document order so wrapped names can
    # still be appended before records are built.
    pending: List[Tuple[float, str, str, Dict[str, str]]] = []
    for row in rows:
        if header is None:
            if _is_header(row):
                header = row
            continue
        if row.page != header.page or row.y >= header.y:
            continue
        fields = map_row(row, layout)
        jersey = fields["jersey"].strip()
        name = clean_name(fields["name"])
        if not jersey:
            if pending and name and len(row) < _CONTINUATION_MAX_TOKENS:
                last_y, last_jersey, last_name, last_fields = pending[-1]
                if 0 < last_y - row.y <= _CONTINUATION_MAX_GAP:
                    pending[-1] = (row.y, last_jersey, f"{last_name} {name}", last_fields)
                    logger.debug("Joined wrapped volleyball name for #%s", last_jersey)
            continue
        if jersey == _TEAM_JERSEY or not jersey.isdigit():
            continue
        if not name or any(marker in name for marker in _EXCLUDED_NAMES):
            continue
        pending.append((row.y, jersey, name, fields))

    if header is None:
        return ParseResult(warnings=["Volleyball header row (Player, SP, PTS) not found"])
    records = [_record(jersey, name, fields) for _, jersey, name, fields in pending]
    records.sort(key=lambda record: slot_sort_key(record.jersey))
    return ParseResult(records=records)
