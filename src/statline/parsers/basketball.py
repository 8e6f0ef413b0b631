"""Basketball season stats read column by column from a Sidearm sheet."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from statline.config.layouts import ColumnLayout, get_layout
from statline.jerseys import slot_sort_key
from statline.models import BasketballRecord
from statline.pdf.columns import map_row
from statline.pdf.layout import Row

from .common import ParseResult, clean_name, split_pair, to_float, to_int


logger = logging.getLogger(__name__)

_HEADER_MARKERS = ("GP-GS", "FG-FGA")
_EXCLUDED_NAMES = ("Total", "Opponents")


def _record(jersey: str, name: str, fields: Dict[str, str]) -> BasketballRecord:
    gp, gs = split_pair(fields["gp_gs"])
    if gp is None:
        gp = to_int(fields["gp_gs"])
    fg_made, fg_att = split_pair(fields["fg_fga"])
    three_made, three_att = split_pair(fields["three_fga"])
    ft_made, ft_att = split_pair(fields["ft_fta"])
    return BasketballRecord(
        jersey=jersey,
        name=name,
        gp=gp,
        gs=gs,
        minutes=to_int(fields["minutes"]),
        min_avg=to_float(fields["min_avg"]),
        fg_made=fg_made,
        fg_att=fg_att,
        fg_pct=to_float(fields["fg_pct"]),
        three_made=three_made,
        three_att=three_att,
        three_pct=to_float(fields["three_pct"]),
        ft_made=ft_made,
        ft_att=ft_att,
        ft_pct=to_float(fields["ft_pct"]),
        off_reb=to_int(fields["off_reb"]),
        def_reb=to_int(fields["def_reb"]),
        tot_reb=to_int(fields["tot_reb"]),
        reb_avg=to_float(fields["reb_avg"]),
        pf=to_int(fields["pf"]),
        dq=to_int(fields["dq"]),
        ast=to_int(fields["ast"]),
        to=to_int(fields["to"]),
        blk=to_int(fields["blk"]),
        stl=to_int(fields["stl"]),
        pts=to_int(fields["pts"]),
        pts_avg=to_float(fields["pts_avg"]),
    )


def parse_basketball_rows(rows: Sequence[Row], layout: Optional[ColumnLayout] = None) -> ParseResult:
    """Read the player table below the ``GP-GS ... FG-FGA`` header.

    Only numeric jerseys are kept and the first row seen for a jersey wins.
    Records come back in slot order (jersey 0 after 89, 00 last).
    """

    layout = layout or get_layout("sidearm-basketball")
    header: Optional[Row] = None
    records: List[BasketballRecord] = []
    seen: set[str] = set()
    for row in rows:
        if header is None:
            if all(marker in row.text for marker in _HEADER_MARKERS):
                header = row
            continue
        if row.page != header.page or row.y >= header.y:
            continue
        fields = map_row(row, layout)
        jersey = fields["jersey"].strip()
        if not jersey.isdigit():
            continue
        name = clean_name(fields["name"])
        if not name or any(marker in name for marker in _EXCLUDED_NAMES):
            continue
        if jersey in seen:
            logger.debug("Duplicate basketball jersey %s (%s) ignored", jersey, name)
            continue
        seen.add(jersey)
        records.append(_record(jersey, name, fields))

    if header is None:
        return ParseResult(warnings=["Basketball header row (GP-GS, FG-FGA) not found"])
    records.sort(key=lambda record: slot_sort_key(record.jersey))
    return ParseResult(records=records)
