"""Baseball and softball cumulative stats with one token per column."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional, Tuple

from statline.models import BaseballRecord, BattingLine, PitchingLine

from .common import AthleteTable, ParseResult, clean_name, parse_team_info, split_pair, to_float, to_int


logger = logging.getLogger(__name__)

_BATTING_HEADER = "Sorted by Batting Avg"
_PITCHING_HEADER = "Sorted by Earned Run Avg"
_FIELDING_HEADER = "Sorted by Fielding"

_SKIP_PREFIXES = ("Totals", "Opponents", "LOB:", "PB:")

_PLAYER_LINE = re.compile(r"^(\d+)\s+(.+)")
_BATTING_NAME = re.compile(r"^(.+?)\s+(\.\d+|\d\.\d+)\s+")
_PITCHING_NAME = re.compile(r"^(.+?)\s+(\d+\.\d+)\s+")

# Columns after the name, starting at AVG:
# AVG GP-GS AB R H 2B 3B HR RBI TB SLG% BB HBP SO GDP OB% SF SH SB-ATT
_BATTING_MIN_PARTS = 19
# Columns after the name, starting at ERA:
# ERA W-L APP GS CG SHO SV IP H R ER BB SO 2B 3B HR B/AVG WP HP
_PITCHING_MIN_PARTS = 13


class Section(Enum):
    NONE = "none"
    BATTING = "batting"
    PITCHING = "pitching"


def next_section(line: str) -> Optional[Section]:
    """Return the section a header line switches to, or ``None`` for data."""

    if _BATTING_HEADER in line:
        return Section.BATTING
    if _PITCHING_HEADER in line:
        return Section.PITCHING
    if _FIELDING_HEADER in line:
        return Section.NONE
    return None


def _is_skipped(line: str) -> bool:
    if line.startswith("#") and "Player" in line:
        return True
    return line.startswith(_SKIP_PREFIXES)


def parse_batting_line(rest: str) -> Optional[Tuple[str, BattingLine]]:
    match = _BATTING_NAME.match(rest)
    if not match:
        return None
    parts = rest[match.start(2):].split()
    if len(parts) < _BATTING_MIN_PARTS:
        return None
    sb, att = split_pair(parts[18])
    line = BattingLine(
        ab=to_int(parts[2]),
        r=to_int(parts[3]),
        h=to_int(parts[4]),
        doubles=to_int(parts[5]),
        triples=to_int(parts[6]),
        hr=to_int(parts[7]),
        rbi=to_int(parts[8]),
        bb=to_int(parts[11]),
        hbp=to_int(parts[12]),
        so=to_int(parts[13]),
        gdp=to_int(parts[14]),
        sf=to_int(parts[16]),
        sh=to_int(parts[17]),
        sb=sb,
        att=att,
    )
    return clean_name(match.group(1)), line


def parse_pitching_line(rest: str) -> Optional[Tuple[str, PitchingLine]]:
    match = _PITCHING_NAME.match(rest)
    if not match:
        return None
    parts = rest[match.start(2):].split()
    if len(parts) < _PITCHING_MIN_PARTS:
        return None
    wins, losses = split_pair(parts[1])

    def part(index: int) -> Optional[str]:
        return parts[index] if index < len(parts) else None

    line = PitchingLine(
        era=to_float(parts[0]),
        w=wins,
        l=losses,
        app=to_int(parts[2]),
        gs=to_int(parts[3]),
        cg=to_int(parts[4]),
        sho=parts[5],
        sv=to_int(parts[6]),
        ip=parts[7],
        h=to_int(parts[8]),
        r=to_int(parts[9]),
        er=to_int(parts[10]),
        bb=to_int(parts[11]),
        so=to_int(parts[12]),
        hr=to_int(part(15)),
        hbp=to_int(part(18)),
    )
    return clean_name(match.group(1)), line


def parse_baseball_text(text: str) -> ParseResult:
    """Parse the line-joined text of a cumulative baseball/softball sheet.

    Batting and pitching lines for the same ``(jersey, name)`` end up on one
    record. Lines outside a recognized section are ignored.
    """

    table: AthleteTable[BaseballRecord] = AthleteTable(BaseballRecord)
    section = Section.NONE
    skipped = 0
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        switched = next_section(line)
        if switched is not None:
            section = switched
            continue
        if section is Section.NONE or _is_skipped(line):
            continue
        match = _PLAYER_LINE.match(line)
        if not match:
            continue
        jersey, rest = match.group(1), match.group(2)
        if section is Section.BATTING:
            parsed = parse_batting_line(rest)
            if parsed is None:
                skipped += 1
                continue
            name, batting = parsed
            table.update(table.upsert(jersey, name), batting=batting)
        else:
            parsed_pitching = parse_pitching_line(rest)
            if parsed_pitching is None:
                skipped += 1
                continue
            name, pitching = parsed_pitching
            table.update(table.upsert(jersey, name), pitching=pitching)

    if skipped:
        logger.debug("Skipped %s unparseable baseball line(s)", skipped)
    warnings = [] if len(table) else ["No batting or pitching rows found"]
    return ParseResult(records=table.records(), warnings=warnings, info=parse_team_info(text))
