"""Soccer field-player and goalkeeper tables from a Sidearm sheet."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from statline.config.layouts import ColumnLayout, get_layout
from statline.jerseys import slot_sort_key
from statline.models import SoccerFieldLine, SoccerGoalieLine, SoccerRecord
from statline.pdf.columns import map_row
from statline.pdf.layout import Row

from .common import AthleteTable, ParseResult, clean_name, split_pair, to_float, to_int


logger = logging.getLogger(__name__)

_HEADER_X_MIN = 200
_HEADER_X_MAX = 280
# Goalkeeper rows sit within this many units below the "Goalie" header.
_GOALIE_WINDOW = 200
_EXCLUDED_NAMES = ("Total", "Opponent")


def _find_header(rows: Sequence[Row], label: str) -> Optional[Row]:
    for row in rows:
        for token in row:
            if token.text == label and _HEADER_X_MIN < token.x < _HEADER_X_MAX:
                return row
    return None


def _field_line(fields: Dict[str, str]) -> SoccerFieldLine:
    yellow, red = split_pair(fields["yc_rc"])
    pk, pk_att = split_pair(fields["pk_att"] or "0-0")
    return SoccerFieldLine(
        gp=to_int(fields["gp"]),
        g=to_int(fields["g"]),
        a=to_int(fields["a"]),
        pts=to_int(fields["pts"]),
        sh=to_int(fields["sh"]),
        sh_pct=to_float(fields["sh_pct"]),
        sog=to_int(fields["sog"]),
        sog_pct=to_float(fields["sog_pct"]),
        yc=yellow if yellow is not None else 0,
        rc=red if red is not None else 0,
        gw=to_int(fields["gw"]),
        pk=pk,
        pk_att=pk_att,
    )


def _goalie_line(fields: Dict[str, str]) -> SoccerGoalieLine:
    shutouts = fields["sho"].split("/")[0]
    return SoccerGoalieLine(
        gp=to_int(fields["gp"]),
        minutes=fields["minutes"] or None,
        ga=to_int(fields["ga"]),
        gaa=to_float(fields["gaa"]),
        saves=to_int(fields["saves"]),
        save_pct=to_float(fields["save_pct"]),
        record=fields["wlt"] or None,
        sho=to_int(shutouts),
    )


def parse_soccer_rows(
    rows: Sequence[Row],
    *,
    player_layout: Optional[ColumnLayout] = None,
    goalie_layout: Optional[ColumnLayout] = None,
) -> ParseResult:
    """Parse the page holding the ``Player`` table and the ``Goalie`` table.

    A goalkeeper who also appears in the field table ends up with both
    lines on one record.
    """

    player_layout = player_layout or get_layout("sidearm-soccer-player")
    goalie_layout = goalie_layout or get_layout("sidearm-soccer-goalie")

    player_header = _find_header(rows, "Player")
    if player_header is None:
        return ParseResult(warnings=["Soccer 'Player' header not found"])
    page_rows = [row for row in rows if row.page == player_header.page]
    goalie_header = _find_header(page_rows, "Goalie")

    table: AthleteTable[SoccerRecord] = AthleteTable(SoccerRecord)
    for row in page_rows:
        fields = map_row(row, player_layout)
        jersey = fields["jersey"].strip()
        if not jersey.isdigit():
            continue
        name = clean_name(fields["name"])
        if not name or any(marker in name for marker in _EXCLUDED_NAMES):
            continue
        if goalie_header is not None and goalie_header.y - _GOALIE_WINDOW < row.y < goalie_header.y:
            goalie = _goalie_line(map_row(row, goalie_layout))
            table.update(table.upsert(jersey, name), goalie=goalie)
        elif row.y < player_header.y:
            table.update(table.upsert(jersey, name), outfield=_field_line(fields))

    records: List[SoccerRecord] = sorted(table.records(), key=lambda r: slot_sort_key(r.jersey))
    return ParseResult(records=records)
