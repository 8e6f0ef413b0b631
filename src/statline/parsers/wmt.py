"""Adapter for the WMT Digital statistics API.

Schools on the WMT platform publish season stats as JSON rather than a
PDF. Each player entry carries ``statistic.data.season.columns[0]``; a
season given as a list (usually empty) means the athlete has no stats.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

import httpx

from statline.config.settings import Settings
from statline.config.sports import get_sport
from statline.errors import SourceUnavailable
from statline.models import (
    BaseballRecord,
    BasketballRecord,
    BattingLine,
    PitchingLine,
    StatRecord,
    VolleyballRecord,
)

from .common import ParseResult


logger = logging.getLogger(__name__)

PER_PAGE = 150

_API_TEAM_ID = re.compile(r"api\.wmt\.games.*teams/(\d{5,7})")
_PAGE_TEAM_ID_PATTERNS = (
    re.compile(r"wmt\.games/[^/]+/stats/season/(\d{5,7})"),
    re.compile(r"teams/(\d{5,7})"),
    re.compile(r"[,\"](\d{6,7})[\",:]"),
)

Stats = Mapping[str, Any]


def season_stats(player: Mapping[str, Any]) -> Optional[Stats]:
    statistic = player.get("statistic")
    data = statistic.get("data") if isinstance(statistic, Mapping) else None
    season = data.get("season") if isinstance(data, Mapping) else None
    if not isinstance(season, Mapping):
        return None
    columns = season.get("columns") or []
    if not isinstance(columns, list) or not columns or not isinstance(columns[0], Mapping):
        return None
    stats = columns[0].get("statistic")
    return stats if isinstance(stats, Mapping) else None


def _has(stats: Optional[Stats], key: str) -> bool:
    return stats is not None and stats.get(key) is not None


def _num(stats: Optional[Stats], key: str) -> float:
    if stats is None:
        return 0
    value = stats.get(key)
    if value is None:
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _int(stats: Optional[Stats], key: str) -> int:
    return int(_num(stats, key))


def _pct(stats: Optional[Stats], key: str) -> float:
    """Whole-number percentages (45.5) become ratios (0.455)."""

    return round(_num(stats, key) / 100, 3)


def _per(total: float, count: float, digits: int) -> float:
    return round(total / count, digits) if count > 0 else 0.0


def _name(player: Mapping[str, Any]) -> str:
    return f"{player.get('first_name') or ''} {player.get('last_name') or ''}".strip()


def _jersey(player: Mapping[str, Any]) -> str:
    return str(player.get("jersey_no") or "").strip()


def _baseball(player: Mapping[str, Any]) -> Optional[StatRecord]:
    stats = season_stats(player)
    batting = None
    pitching = None
    if _has(stats, "sAtBats"):
        steals = _int(stats, "sStolenBases")
        batting = BattingLine(
            ab=_int(stats, "sAtBats"),
            r=_int(stats, "sRuns"),
            h=_int(stats, "sHits"),
            doubles=_int(stats, "sDoubles"),
            triples=_int(stats, "sTriples"),
            hr=_int(stats, "sHomeRuns"),
            rbi=_int(stats, "sRunsBattedIn"),
            bb=_int(stats, "sWalks"),
            hbp=_int(stats, "sHitByPitch"),
            so=_int(stats, "sStrikeoutsHitting"),
            gdp=_int(stats, "sGroundedIntoDoublePlay"),
            sf=_int(stats, "sSacrificeFlies"),
            sh=_int(stats, "sSacrificeHitsAllowed"),
            sb=steals,
            att=steals + _int(stats, "sCaughtStealingBy"),
        )
    if stats is not None and _has(stats, "sInningsPitched"):
        pitching = PitchingLine(
            w=_int(stats, "sIndWon"),
            l=_int(stats, "sIndLost"),
            app=_int(stats, "sPitchingAppearances"),
            gs=_int(stats, "sPitcherGamesStarted"),
            cg=_int(stats, "sCompleteGames"),
            sho=str(_int(stats, "sShutouts")),
            sv=_int(stats, "sSaves"),
            ip=str(stats["sInningsPitched"]),
            h=_int(stats, "sHitsAllowed"),
            r=_int(stats, "sRunsAllowed"),
            er=_int(stats, "sEarnedRuns"),
            bb=_int(stats, "sBasesOnBallsAllowed"),
            so=_int(stats, "sStrikeouts"),
            hr=_int(stats, "sHomeRunsAllowed"),
            hbp=_int(stats, "sHitBattersPitching"),
        )
    return BaseballRecord(jersey=_jersey(player), name=_name(player), batting=batting, pitching=pitching)


def _basketball(player: Mapping[str, Any]) -> Optional[StatRecord]:
    stats = season_stats(player)
    games = _int(stats, "sGames")
    if stats is None or games <= 0:
        return None
    minutes = math.floor(_num(stats, "sMinutesPlayed") / 60)
    return BasketballRecord(
        jersey=_jersey(player),
        name=_name(player),
        gp=games,
        gs=_int(stats, "sGamesStarted"),
        minutes=minutes,
        min_avg=_per(minutes, games, 1),
        fg_made=_int(stats, "sFieldGoalsMade"),
        fg_att=_int(stats, "sFieldGoalsAttempted"),
        fg_pct=_pct(stats, "sFieldGoalPct"),
        three_made=_int(stats, "sThreePointFieldGoalsMade"),
        three_att=_int(stats, "sThreePointFieldGoalsAttempted"),
        three_pct=_pct(stats, "s3PointFGPercent"),
        ft_made=_int(stats, "sFreeThrowsMade"),
        ft_att=_int(stats, "sFreeThrowsAttempted"),
        ft_pct=_pct(stats, "sFreeThrowPct"),
        off_reb=_int(stats, "sOffensiveRebounds"),
        def_reb=_int(stats, "sDefensiveRebounds"),
        tot_reb=_int(stats, "sTotalRebounds"),
        reb_avg=_per(_num(stats, "sTotalRebounds"), games, 1),
        pf=_int(stats, "sPersonalFouls"),
        dq=_int(stats, "sDisqualifications"),
        ast=_int(stats, "sAssists"),
        to=_int(stats, "sTurnovers"),
        blk=_int(stats, "sBlockedShots"),
        stl=_int(stats, "sSteals"),
        pts=_int(stats, "sPoints"),
        pts_avg=_per(_num(stats, "sPoints"), games, 1),
    )


def _volleyball(player: Mapping[str, Any]) -> Optional[StatRecord]:
    stats = season_stats(player)
    if not _has(stats, "sSets"):
        return None
    sets = _int(stats, "sSets")
    kills = _num(stats, "sKills")
    aces = _num(stats, "sServiceAces")
    solos = _num(stats, "sBlockSolos")
    block_assists = _num(stats, "sBlockAssists")
    blocks = solos + block_assists * 0.5
    points = _num(stats, "sPoints") or kills + aces + blocks
    attack_pct = stats.get("sAttackPCT") if stats is not None else None
    try:
        pct = float(attack_pct) if attack_pct not in (None, "") else 0.0
    except (TypeError, ValueError):
        pct = 0.0
    return VolleyballRecord(
        jersey=_jersey(player),
        name=_name(player),
        sp=sets,
        k=int(kills),
        k_per_set=_per(kills, sets, 2),
        e=_int(stats, "sErrors"),
        ta=_int(stats, "sTotalAttacks"),
        pct=pct,
        a=_int(stats, "sAssists"),
        a_per_set=_per(_num(stats, "sAssists"), sets, 2),
        sa=int(aces),
        se=_int(stats, "sServiceErrors"),
        sa_per_set=_per(aces, sets, 2),
        re=_int(stats, "sReceptionErrors"),
        dig=_int(stats, "sDigs"),
        dig_per_set=_per(_num(stats, "sDigs"), sets, 2),
        bs=int(solos),
        ba=int(block_assists),
        blk=round(blocks, 1),
        blk_per_set=_per(blocks, sets, 2),
        be=_int(stats, "sBlockErrors"),
        bhe=_int(stats, "sBallHandlingErrors"),
        pts=round(points, 1),
    )


_BUILDERS: Dict[str, Callable[[Mapping[str, Any]], Optional[StatRecord]]] = {
    "baseball": _baseball,
    "basketball": _basketball,
    "volleyball": _volleyball,
}


def jersey_order(record: StatRecord) -> tuple[int, int]:
    """Sort key: named athletes before nameless ones, then by jersey.

    "00" leads, "0" follows as the number zero, the rest ascend numerically
    and non-numeric jerseys come last.
    """

    has_name = bool(record.name.strip())
    if record.jersey == "00":
        number = -1
    else:
        number = int(record.jersey) if record.jersey.isdigit() else 999
    return (0 if has_name else 1, number)


def records_from_payload(sport: str, payload: Mapping[str, Any]) -> ParseResult:
    family = get_sport(sport).family
    builder = _BUILDERS.get(family)
    if builder is None:
        raise ValueError(f"The WMT API adapter does not cover {sport}")
    players = payload.get("data") or []
    records: List[StatRecord] = []
    for player in players:
        if not isinstance(player, Mapping):
            continue
        record = builder(player)
        if record is not None:
            records.append(record)
    records.sort(key=jersey_order)
    logger.debug("Built %s %s record(s) from %s WMT player(s)", len(records), family, len(players))
    return ParseResult(records=records)


def resolve_team_id(url: str, html: Optional[str] = None) -> Optional[str]:
    """Find the WMT team id in an API URL, or in a stats page's HTML."""

    match = _API_TEAM_ID.search(url)
    if match:
        return match.group(1)
    if html:
        for pattern in _PAGE_TEAM_ID_PATTERNS:
            match = pattern.search(html)
            if match:
                return match.group(1)
    return None


def team_players_url(team_id: str, settings: Optional[Settings] = None) -> str:
    settings = settings or Settings.from_env()
    return f"{settings.wmt_base_url}/teams/{team_id}/players?per_page={PER_PAGE}"


def fetch_payload(team_id: str, *, client: Optional[httpx.Client] = None, settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or Settings.from_env()
    url = team_players_url(team_id, settings)
    owns_client = client is None
    client = client or httpx.Client(timeout=settings.fetch_timeout, headers={"User-Agent": settings.user_agent})
    try:
        response = client.get(url)
        response.raise_for_status()
        return response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise SourceUnavailable([url], str(exc)) from exc
    finally:
        if owns_client:
            client.close()


def fetch_team_id(url: str, *, client: Optional[httpx.Client] = None, settings: Optional[Settings] = None) -> str:
    """Resolve the team id for ``url``, downloading the page when needed."""

    team_id = resolve_team_id(url)
    if team_id:
        return team_id
    settings = settings or Settings.from_env()
    owns_client = client is None
    client = client or httpx.Client(
        timeout=settings.fetch_timeout,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )
    try:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
    except httpx.HTTPError as exc:
        raise SourceUnavailable([url], str(exc)) from exc
    finally:
        if owns_client:
            client.close()
    team_id = resolve_team_id(url, html)
    if team_id is None:
        raise SourceUnavailable([url], "no WMT team id found on the page")
    return team_id
