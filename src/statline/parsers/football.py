"""Football cumulative stats: a section state machine over text lines.

The sheet prints one table per stat group (rushing, passing, defense...)
under a ``# <Section>`` header. The current section decides how a data line
is read; a player who appears in several sections accumulates one record in
an :class:`AthleteTable`.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from statline.models import (
    DefenseLine,
    FootballRecord,
    KickingLine,
    PassingLine,
    PuntingLine,
    ReceivingLine,
    ReturnsLine,
    RushingLine,
)

from .common import AthleteTable, ParseResult, to_float, to_int


logger = logging.getLogger(__name__)


class Section(Enum):
    NONE = "none"
    RUSHING = "rushing"
    PASSING = "passing"
    RECEIVING = "receiving"
    PUNT_RETURNS = "punt_returns"
    KICK_RETURNS = "kick_returns"
    SCORING = "scoring"
    FIELD_GOALS = "field_goals"
    PUNTING = "punting"
    DEFENSE = "defense"


_HEADERS: Tuple[Tuple[str, Section], ...] = (
    ("# Rushing", Section.RUSHING),
    ("# Passing", Section.PASSING),
    ("# Receiving", Section.RECEIVING),
    ("# Punt Returns", Section.PUNT_RETURNS),
    ("# Kick Returns", Section.KICK_RETURNS),
    ("# Interceptions", Section.NONE),
    ("# Scoring", Section.SCORING),
    ("# Field Goals", Section.FIELD_GOALS),
    ("# Punting", Section.PUNTING),
    ("# Kickoffs", Section.NONE),
    ("# Total Offense", Section.NONE),
    ("# All Purpose", Section.NONE),
    ("# Defensive Leaders", Section.DEFENSE),
    ("Tackles Sacks Pass Defense", Section.DEFENSE),
)

_SKIP_PREFIXES = ("Total", "Opponents", "Team")
_HEADER_RESIDUE = "GP ATT GAIN"
_DASH = "—"

_NAME = r"([A-Za-z\s.,'-]+?)"
_RUSHING = re.compile(
    rf"^(\d+)\s+{_NAME}\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s+(-?\d+)\s+(-?\d+\.?\d*)\s+(\d+)\s+(-?\d+)\s+(-?\d+\.?\d*)"
)
_PASSING = re.compile(rf"^(\d+)\s+{_NAME}\s+(\d+)\s+(-?\d+\.?\d*)\s+(\d+)-(\d+)-(\d+)\s")
_RECEIVING = re.compile(
    rf"^(\d+)\s+{_NAME}\s+(\d+)\s+(\d+)\s+(-?\d+)\s+(-?\d+\.?\d*)\s+(\d+)\s+(-?\d+)\s+(-?\d+\.?\d*)"
)
_LEADING_NUMBER = re.compile(rf"^(\d+)\s+{_NAME}\s+(\d+)\s+")
_FIELD_GOALS = re.compile(rf"^(\d+)\s+{_NAME}\s+(\d+)-(\d+)\s+(\d+\.?\d*)\s+%")
_SCORING = re.compile(rf"^(\d+)\s+{_NAME}\s+(?=\d|{_DASH})")
_RETURNS = re.compile(rf"^(\d+)\s+{_NAME}\s+(?=\d)")


def transition(line: str) -> Tuple[str, Optional[Section]]:
    """Split a line into its data portion and the section it switches to.

    The text layer sometimes glues a section header onto the last data row
    of the previous table, so the header may start mid-line. Everything
    before the first header is data for the current section; the last
    header on the line decides the next state. ``None`` means no header.
    """

    found: List[Tuple[int, Section]] = []
    for marker, section in _HEADERS:
        index = line.find(marker)
        if index >= 0:
            found.append((index, section))
    if not found:
        return line, None
    found.sort(key=lambda item: item[0])
    return line[: found[0][0]].strip(), found[-1][1]


def _number(value: str) -> int:
    return to_int(value) or 0


def _decimal(value: str) -> float:
    return to_float(value) or 0.0


Table = AthleteTable[FootballRecord]


def _rushing(line: str, table: Table) -> bool:
    match = _RUSHING.match(line)
    if not match:
        return False
    jersey, name, _gp, att, gain, loss, net, avg, td, long, avg_game = match.groups()
    rushing = RushingLine(
        att=int(att),
        gain=int(gain),
        loss=int(loss),
        net=int(net),
        avg=float(avg),
        td=int(td),
        long=int(long),
        avg_game=float(avg_game),
    )
    table.update(table.upsert(jersey, name.strip()), rushing=rushing)
    return True


def _passing(line: str, table: Table) -> bool:
    match = _PASSING.match(line)
    if not match:
        return False
    jersey, name, _gp, _rating, comp, att, interceptions = match.groups()
    parts = [part for part in line[match.end():].split() if part != "%"]
    if len(parts) < 5:
        return False
    passing = PassingLine(
        comp=int(comp),
        att=int(att),
        interceptions=int(interceptions),
        yds=_number(parts[1]),
        td=_number(parts[2]),
        long=_number(parts[3]),
        avg_game=_decimal(parts[4]),
    )
    table.update(table.upsert(jersey, name.strip()), passing=passing)
    return True


def _receiving(line: str, table: Table) -> bool:
    match = _RECEIVING.match(line)
    if not match:
        return False
    jersey, name, _gp, no, yds, avg, td, long, avg_game = match.groups()
    receiving = ReceivingLine(
        no=int(no),
        yds=int(yds),
        avg=float(avg),
        td=int(td),
        long=int(long),
        avg_game=float(avg_game),
    )
    table.update(table.upsert(jersey, name.strip()), receiving=receiving)
    return True


def _defense(line: str, table: Table) -> bool:
    match = _LEADING_NUMBER.match(line)
    if not match:
        return False
    jersey, name, _gp = match.groups()
    # SOLO AST TOT TFL/YDS SACKS/YDS INT BU QBH RCV FF KICK SAF
    parts = line[match.end():].split()
    if len(parts) < 12:
        return False
    defense = DefenseLine(
        solo=_number(parts[0]),
        asst=_number(parts[1]),
        tot=_decimal(parts[2]),
        tfl=parts[3],
        sacks=parts[4],
        interceptions=parts[5],
        pbu=_number(parts[6]),
        qbh=_number(parts[7]),
        fr=parts[8],
        ff=_number(parts[9]),
        blk=_number(parts[10]),
        saf=_number(parts[11]),
    )
    table.update(table.upsert(jersey, name.strip()), defense=defense)
    return True


def _punting(line: str, table: Table) -> bool:
    match = _LEADING_NUMBER.match(line)
    if not match:
        return False
    jersey, name, punts = match.groups()
    # YDS AVG LNG TB FC I20 50+ BLKD after the punt count
    parts = line[match.end():].split()
    if len(parts) < 8:
        return False
    punting = PuntingLine(
        no=int(punts),
        yds=_number(parts[0]),
        avg=_decimal(parts[1]),
        long=_number(parts[2]),
        tb=_number(parts[3]),
        fc=_number(parts[4]),
        i20=_number(parts[5]),
        plus50=_number(parts[6]),
        blk=_number(parts[7]),
    )
    table.update(table.upsert(jersey, name.strip()), punting=punting)
    return True


def _field_goals(line: str, table: Table) -> bool:
    match = _FIELD_GOALS.match(line)
    if not match:
        return False
    jersey, name, made, attempted, pct = match.groups()
    parts = line[match.end():].split()
    if len(parts) < 2:
        return False
    athlete_id = table.upsert(jersey, name.strip())
    kicking = table.get(athlete_id).kicking or KickingLine()
    kicking = kicking.model_copy(
        update={"fgm": int(made), "fga": int(attempted), "pct": float(pct), "long": _number(parts[-2])}
    )
    table.update(athlete_id, kicking=kicking)
    return True


def _scoring(line: str, table: Table) -> bool:
    match = _SCORING.match(line)
    if not match:
        return False
    jersey, name = match.groups()
    # TD FG KICK RUSH RCV PASS DXP SAF PTS
    parts = line[match.end():].split()
    if len(parts) < 9:
        return False
    athlete_id = table.upsert(jersey, name.strip())
    kicking = table.get(athlete_id).kicking or KickingLine()
    kicking = kicking.model_copy(
        update={
            "pat": "" if parts[2] == _DASH else parts[2],
            "pts": 0 if parts[8] == _DASH else _number(parts[8]),
        }
    )
    table.update(athlete_id, kicking=kicking)
    return True


def _returns(prefix: str) -> Callable[[str, Table], bool]:
    def handler(line: str, table: Table) -> bool:
        match = _RETURNS.match(line)
        if not match:
            return False
        jersey, name = match.groups()
        # NO YDS AVG TD LG
        parts = line[match.end():].split()
        if len(parts) < 5:
            return False
        athlete_id = table.upsert(jersey, name.strip())
        returns = table.get(athlete_id).returns or ReturnsLine()
        returns = returns.model_copy(
            update={
                f"{prefix}_no": _number(parts[0]),
                f"{prefix}_yds": _number(parts[1]),
                f"{prefix}_td": _number(parts[3]),
                f"{prefix}_long": _number(parts[4]),
            }
        )
        table.update(athlete_id, returns=returns)
        return True

    return handler


_HANDLERS: Dict[Section, Callable[[str, Table], bool]] = {
    Section.RUSHING: _rushing,
    Section.PASSING: _passing,
    Section.RECEIVING: _receiving,
    Section.DEFENSE: _defense,
    Section.PUNTING: _punting,
    Section.FIELD_GOALS: _field_goals,
    Section.SCORING: _scoring,
    Section.PUNT_RETURNS: _returns("pr"),
    Section.KICK_RETURNS: _returns("kr"),
}


def _process(line: str, section: Section, table: Table) -> None:
    if not line or section is Section.NONE:
        return
    if line.startswith(_SKIP_PREFIXES) or _HEADER_RESIDUE in line:
        return
    try:
        _HANDLERS[section](line, table)
    except (ValueError, IndexError) as exc:
        logger.debug("Skipping %s line %r: %s", section.value, line, exc)


def parse_football_text(text: str) -> ParseResult:
    table: Table = AthleteTable(FootballRecord)
    section = Section.NONE
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        data, switched = transition(line)
        _process(data, section, table)
        if switched is not None:
            section = switched
    warnings = [] if len(table) else ["No football stat lines found"]
    return ParseResult(records=table.records(), warnings=warnings)
