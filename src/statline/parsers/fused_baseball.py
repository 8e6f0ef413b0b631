"""Baseball sheets whose text layer fuses adjacent numeric columns.

Rows are re-tokenized by horizontal gap, tokens are sorted into the x
regions of the calibrated layout, and regions that hold several columns are
resolved with the digit splitter. Names are printed "Last, First" with no
jersey, so records carry an empty jersey and rely on name matching.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from statline.config.layouts import ColumnLayout, get_layout
from statline.models import BaseballRecord, BattingLine, PitchingLine
from statline.pdf.columns import collect_regions, tokenize_row
from statline.pdf.layout import PositionedToken, Row
from statline.pdf.splitter import (
    extract_rbi,
    split_batting_run,
    split_innings,
    split_pitching_run,
    split_steals,
    total_bases,
)

from .common import AthleteTable, ParseResult, clean_name, split_pair, to_float, to_int


logger = logging.getLogger(__name__)

_SKIP_MARKERS = (
    "Totals",
    "Opponents",
    "LOB",
    "Team",
    "Record",
    "All Games",
    "PB ",
    "Season",
    "As of",
    "Inn",
    "Pickoffs",
    "SBA / ATT",
    "SBA/ATT",
)
_ERA_WITH_RECORD = re.compile(r"^(\d+\.\d{2})(\d+-\d+)")
_MIN_ROW_TOKENS = 3


class Section(Enum):
    NONE = "none"
    BATTING = "batting"
    PITCHING = "pitching"


def header_section(text: str) -> Optional[Section]:
    if "PLAYER" not in text:
        return None
    if "ERA" in text and "IP" in text:
        return Section.PITCHING
    if "FLD" in text and "PO" in text:
        return Section.NONE
    if "AVG" in text and ("AB" in text or "GP" in text):
        return Section.BATTING
    return None


def _is_skipped(text: str) -> bool:
    if text.startswith("-") or any(marker in text for marker in _SKIP_MARKERS):
        return True
    return ";" in text and "(" in text


def _last(values: Sequence[str]) -> Optional[str]:
    return values[-1] if values else None


def _split_name(tokens: Sequence[PositionedToken], layout: ColumnLayout) -> Tuple[Optional[str], List[PositionedToken]]:
    name_column = layout.column("name")
    name_parts = [t.text for t in tokens if name_column.contains(t.x)]
    data = [t for t in tokens if not name_column.contains(t.x)]
    if not name_parts:
        return None, data
    name = clean_name("".join(name_parts))
    return (name if "," in name else None), data


def parse_batting_tokens(
    tokens: Sequence[PositionedToken],
    layout: ColumnLayout,
    warnings: List[str],
) -> Optional[Tuple[str, BattingLine]]:
    name, data = _split_name(tokens, layout)
    if name is None:
        return None
    regions = collect_regions(data, layout)

    at_bats = to_int(_last(regions["ab"]))
    walks = to_int(_last(regions["bb"]))
    hit_by_pitch = to_int(_last(regions["hp"]))
    if not regions["hp"] and walks is not None and walks >= 10:
        # BB and HP printed as one token: the trailing digit is HP.
        digits = str(walks)
        walks, hit_by_pitch = int(digits[:-1]), int(digits[-1])

    double_plays = to_int(_last([t for t in regions["gdp"] if "." not in t]))
    sac_flies: Optional[int] = None
    sac_hits: Optional[int] = None
    sf_text = _last(regions["sf"])
    if sf_text and sf_text.isdigit():
        if len(sf_text) >= 2:
            sac_flies, sac_hits = int(sf_text[0]), int(sf_text[1:])
        else:
            sac_flies = int(sf_text)
    if regions["sh"]:
        sac_hits = to_int(regions["sh"][-1])

    merged_run = "".join(regions["r_h_xb"])
    runs = hits = doubles = triples = homers = None
    known_total_bases: Optional[int] = None
    if len(merged_run) >= 4:
        split = split_batting_run(merged_run, at_bats or 0)
        if split is None:
            warnings.append(f"{name}: no consistent split for runs/hits token '{merged_run}'")
            logger.warning("Ambiguous batting run token %r for %s; leaving fields unset", merged_run, name)
        else:
            runs, hits, doubles, triples, homers = split
            known_total_bases = total_bases(hits, doubles, triples, homers)
    elif merged_run:
        runs = to_int(merged_run)

    steals = attempts = None
    sb_text = _last([t for t in regions["sb_att"] if "-" in t])
    if sb_text:
        pair = split_steals(sb_text)
        if pair is not None:
            steals, attempts = pair

    line = BattingLine(
        ab=at_bats,
        r=runs,
        h=hits,
        doubles=doubles,
        triples=triples,
        hr=homers,
        rbi=extract_rbi("".join(regions["rbi_tb"]), known_total_bases),
        bb=walks,
        hbp=hit_by_pitch,
        so=to_int(_last(regions["so"])),
        gdp=double_plays,
        sf=sac_flies,
        sh=sac_hits,
        sb=steals,
        att=attempts,
    )
    return name, line


def parse_pitching_tokens(
    tokens: Sequence[PositionedToken],
    layout: ColumnLayout,
    warnings: List[str],
) -> Optional[Tuple[str, PitchingLine]]:
    name, data = _split_name(tokens, layout)
    if name is None:
        return None
    regions = collect_regions(data, layout)

    era_text = _last(regions["era"]) or ""
    record_text = _last(regions["w_l"]) or ""
    if "-" in era_text and not record_text:
        fused = _ERA_WITH_RECORD.match(era_text)
        if fused:
            era_text, record_text = fused.group(1), fused.group(2)
    wins, losses = split_pair(record_text)

    has_walks = bool(regions["bb"])
    walks = to_int(_last(regions["bb"]))
    strikeouts = to_int(_last(regions["so"]))
    hits = runs = earned = None

    merged_ip = "".join(regions["ip_run"])
    innings: Optional[str] = merged_ip or None
    split = split_innings(merged_ip) if merged_ip else None
    if split is not None:
        innings, rest = split
        if len(rest) >= 5 and not has_walks:
            run = split_pitching_run(rest, 5)
            if run is None:
                warnings.append(f"{name}: no consistent split for pitching token '{merged_ip}'")
                logger.warning("Ambiguous pitching token %r for %s; leaving fields unset", merged_ip, name)
            else:
                hits, runs, earned, walks, strikeouts = run
        elif len(rest) >= 3 and has_walks:
            run = split_pitching_run(rest, 3)
            if run is None:
                warnings.append(f"{name}: no consistent split for pitching token '{merged_ip}'")
                logger.warning("Ambiguous pitching token %r for %s; leaving fields unset", merged_ip, name)
            else:
                hits, runs, earned = run.h, run.r, run.er
        elif rest:
            hits = to_int(rest)

    line = PitchingLine(
        era=to_float(era_text),
        w=wins,
        l=losses,
        app=to_int(_last(regions["app"])),
        gs=to_int(_last(regions["gs"])),
        cg=to_int(_last(regions["cg"])),
        sho=_last(regions["sho"]),
        sv=to_int(_last(regions["sv"])),
        ip=innings,
        h=hits,
        r=runs,
        er=earned,
        bb=walks,
        so=strikeouts,
        hr=to_int(_last(regions["hr"])),
        hbp=to_int(_last(regions["hp"])),
    )
    return name, line


def _process_row(
    row: Row,
    section: Section,
    table: AthleteTable[BaseballRecord],
    batting_layout: ColumnLayout,
    pitching_layout: ColumnLayout,
    warnings: List[str],
) -> None:
    if section is Section.BATTING:
        tokens = tokenize_row(row, batting_layout.merge_gap or 0.0, batting_layout.breaks)
        batting = parse_batting_tokens(tokens, batting_layout, warnings)
        if batting is not None:
            table.update(table.upsert("", batting[0]), batting=batting[1])
    else:
        tokens = tokenize_row(row, pitching_layout.merge_gap or 0.0, pitching_layout.breaks)
        pitching = parse_pitching_tokens(tokens, pitching_layout, warnings)
        if pitching is not None:
            table.update(table.upsert("", pitching[0]), pitching=pitching[1])


def parse_fused_rows(
    rows: Sequence[Row],
    *,
    batting_layout: Optional[ColumnLayout] = None,
    pitching_layout: Optional[ColumnLayout] = None,
) -> ParseResult:
    batting_layout = batting_layout or get_layout("fused-baseball-batting")
    pitching_layout = pitching_layout or get_layout("fused-baseball-pitching")
    table: AthleteTable[BaseballRecord] = AthleteTable(BaseballRecord)
    warnings: List[str] = []
    section = Section.NONE
    page: Optional[int] = None

    for row in rows:
        if row.page != page:
            page = row.page
            section = Section.NONE
        text = " ".join(row.text.split())
        switched = header_section(text)
        if switched is not None:
            section = switched
            continue
        if section is Section.NONE or _is_skipped(text) or len(row) < _MIN_ROW_TOKENS:
            continue
        try:
            _process_row(row, section, table, batting_layout, pitching_layout, warnings)
        except (ValueError, IndexError) as exc:
            logger.debug("Skipping %s row %r: %s", section.value, text, exc)

    if not len(table):
        warnings.append("No fused-token batting or pitching rows found")
    return ParseResult(records=table.records(), warnings=warnings)
