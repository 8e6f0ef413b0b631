"""Sparse per-sport stat records produced by parsers and the API adapter.

Every numeric field is optional: ``None`` means the value was not found in
the source document, which is different from a recorded zero. Records are
keyed by ``(jersey, name)`` exactly as printed in the source.
"""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict


class _Line(BaseModel):
    model_config = ConfigDict(frozen=True)


class BattingLine(_Line):
    ab: Optional[int] = None
    r: Optional[int] = None
    h: Optional[int] = None
    doubles: Optional[int] = None
    triples: Optional[int] = None
    hr: Optional[int] = None
    rbi: Optional[int] = None
    bb: Optional[int] = None
    hbp: Optional[int] = None
    so: Optional[int] = None
    gdp: Optional[int] = None
    sf: Optional[int] = None
    sh: Optional[int] = None
    sb: Optional[int] = None
    att: Optional[int] = None

    @property
    def cs(self) -> Optional[int]:
        if self.sb is None or self.att is None:
            return None
        return self.att - self.sb


class PitchingLine(_Line):
    era: Optional[float] = None
    w: Optional[int] = None
    l: Optional[int] = None
    app: Optional[int] = None
    gs: Optional[int] = None
    cg: Optional[int] = None
    sho: Optional[str] = None
    sv: Optional[int] = None
    ip: Optional[str] = None
    h: Optional[int] = None
    r: Optional[int] = None
    er: Optional[int] = None
    bb: Optional[int] = None
    so: Optional[int] = None
    hr: Optional[int] = None
    hbp: Optional[int] = None


class _Record(BaseModel):
    jersey: str = ""
    name: str

    model_config = ConfigDict(frozen=True)


class BaseballRecord(_Record):
    sport: Literal["baseball"] = "baseball"
    batting: Optional[BattingLine] = None
    pitching: Optional[PitchingLine] = None

    def has_stats(self) -> bool:
        return self.batting is not None or self.pitching is not None


class BasketballRecord(_Record):
    sport: Literal["basketball"] = "basketball"
    gp: Optional[int] = None
    gs: Optional[int] = None
    minutes: Optional[int] = None
    min_avg: Optional[float] = None
    fg_made: Optional[int] = None
    fg_att: Optional[int] = None
    fg_pct: Optional[float] = None
    three_made: Optional[int] = None
    three_att: Optional[int] = None
    three_pct: Optional[float] = None
    ft_made: Optional[int] = None
    ft_att: Optional[int] = None
    ft_pct: Optional[float] = None
    off_reb: Optional[int] = None
    def_reb: Optional[int] = None
    tot_reb: Optional[int] = None
    reb_avg: Optional[float] = None
    pf: Optional[int] = None
    dq: Optional[int] = None
    ast: Optional[int] = None
    to: Optional[int] = None
    blk: Optional[int] = None
    stl: Optional[int] = None
    pts: Optional[int] = None
    pts_avg: Optional[float] = None

    def has_stats(self) -> bool:
        return self.gp is not None


class SoccerFieldLine(_Line):
    gp: Optional[int] = None
    g: Optional[int] = None
    a: Optional[int] = None
    pts: Optional[int] = None
    sh: Optional[int] = None
    sh_pct: Optional[float] = None
    sog: Optional[int] = None
    sog_pct: Optional[float] = None
    yc: Optional[int] = None
    rc: Optional[int] = None
    gw: Optional[int] = None
    pk: Optional[int] = None
    pk_att: Optional[int] = None


class SoccerGoalieLine(_Line):
    gp: Optional[int] = None
    minutes: Optional[str] = None
    ga: Optional[int] = None
    gaa: Optional[float] = None
    saves: Optional[int] = None
    save_pct: Optional[float] = None
    record: Optional[str] = None
    sho: Optional[int] = None


class SoccerRecord(_Record):
    sport: Literal["soccer"] = "soccer"
    outfield: Optional[SoccerFieldLine] = None
    goalie: Optional[SoccerGoalieLine] = None

    def has_stats(self) -> bool:
        return self.outfield is not None or self.goalie is not None


class VolleyballRecord(_Record):
    sport: Literal["volleyball"] = "volleyball"
    sp: Optional[int] = None
    k: Optional[int] = None
    k_per_set: Optional[float] = None
    e: Optional[int] = None
    ta: Optional[int] = None
    pct: Optional[float] = None
    a: Optional[int] = None
    a_per_set: Optional[float] = None
    sa: Optional[int] = None
    se: Optional[int] = None
    sa_per_set: Optional[float] = None
    re: Optional[int] = None
    dig: Optional[int] = None
    dig_per_set: Optional[float] = None
    bs: Optional[int] = None
    ba: Optional[int] = None
    blk: Optional[float] = None
    blk_per_set: Optional[float] = None
    be: Optional[int] = None
    bhe: Optional[int] = None
    pts: Optional[float] = None

    def has_stats(self) -> bool:
        return self.sp is not None


class PassingLine(_Line):
    comp: int = 0
    att: int = 0
    interceptions: int = 0
    yds: int = 0
    td: int = 0
    long: int = 0
    avg_game: float = 0.0


class RushingLine(_Line):
    att: int = 0
    gain: int = 0
    loss: int = 0
    net: int = 0
    avg: float = 0.0
    td: int = 0
    long: int = 0
    avg_game: float = 0.0


class ReceivingLine(_Line):
    no: int = 0
    yds: int = 0
    avg: float = 0.0
    td: int = 0
    long: int = 0
    avg_game: float = 0.0


class DefenseLine(_Line):
    solo: int = 0
    asst: int = 0
    tot: float = 0.0
    tfl: str = ""
    sacks: str = ""
    interceptions: str = ""
    pbu: int = 0
    qbh: int = 0
    fr: str = ""
    ff: int = 0
    blk: int = 0
    saf: int = 0


class KickingLine(_Line):
    fgm: int = 0
    fga: int = 0
    pct: float = 0.0
    long: int = 0
    pat: str = ""
    pts: int = 0


class PuntingLine(_Line):
    no: int = 0
    yds: int = 0
    avg: float = 0.0
    long: int = 0
    tb: int = 0
    fc: int = 0
    i20: int = 0
    plus50: int = 0
    blk: int = 0


class ReturnsLine(_Line):
    kr_no: int = 0
    kr_yds: int = 0
    kr_td: int = 0
    kr_long: int = 0
    pr_no: int = 0
    pr_yds: int = 0
    pr_td: int = 0
    pr_long: int = 0


class FootballRecord(_Record):
    sport: Literal["football"] = "football"
    passing: Optional[PassingLine] = None
    rushing: Optional[RushingLine] = None
    receiving: Optional[ReceivingLine] = None
    defense: Optional[DefenseLine] = None
    kicking: Optional[KickingLine] = None
    punting: Optional[PuntingLine] = None
    returns: Optional[ReturnsLine] = None

    def has_stats(self) -> bool:
        return any(
            section is not None
            for section in (
                self.passing,
                self.rushing,
                self.receiving,
                self.defense,
                self.kicking,
                self.punting,
                self.returns,
            )
        )


StatRecord = Annotated[
    Union[BaseballRecord, BasketballRecord, SoccerRecord, VolleyballRecord, FootballRecord],
    Field(discriminator="sport"),
]

STAT_RECORD_LIST = TypeAdapter(List[StatRecord])
