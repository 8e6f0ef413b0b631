"""Phased matching of roster entries to parsed stat records.

Phase 1 pairs a roster entry with a record carrying the same jersey when
either the first or the last name agrees loosely. Phase 2 covers athletes
who changed numbers: a different jersey is accepted only when both names
agree exactly. Records printed without a jersey (fused-token baseball
sheets) then get a surname fallback. Each record is consumed by at most
one roster entry.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from statline.jerseys import normalize_jersey
from statline.models import MatchedAthlete, RosterPlayer, StatRecord


logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_NAME_SUFFIX_TOKENS = {"jr", "sr", "ii", "iii", "iv"}


def normalize_name(name: str) -> str:
    """Lowercase alphanumerics only, accents folded and "Jr."/"III" dropped."""

    decomposed = unicodedata.normalize("NFKD", name)
    plain = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower()
    tokens = [tok for tok in _NON_ALNUM.split(plain) if tok and tok not in _NAME_SUFFIX_TOKENS]
    return "".join(tokens)


def extract_last_name(name: str) -> str:
    if "," in name:
        return name.split(",", 1)[0].strip()
    parts = name.split()
    return parts[-1] if parts else ""


def extract_first_name(name: str) -> str:
    if "," in name:
        parts = name.split(",", 1)[1].split()
        return parts[0] if parts else ""
    parts = name.split()
    return parts[0] if parts else ""


def _close(left: str, right: str) -> bool:
    return left == right or left in right or right in left


def loose_name_match(first: str, last: str, stats_name: str) -> bool:
    """First or last name equal, or one containing the other."""

    first_key = normalize_name(first)
    last_key = normalize_name(last)
    stats_first = normalize_name(extract_first_name(stats_name))
    stats_last = normalize_name(extract_last_name(stats_name))
    return _close(last_key, stats_last) or _close(first_key, stats_first)


def exact_name_match(first: str, last: str, stats_name: str) -> bool:
    return (
        normalize_name(first) == normalize_name(extract_first_name(stats_name))
        and normalize_name(last) == normalize_name(extract_last_name(stats_name))
    )


@dataclass(frozen=True)
class MatchReport:
    athletes: List[MatchedAthlete] = field(default_factory=list)
    unmatched_records: List[StatRecord] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return sum(1 for athlete in self.athletes if athlete.stats is not None)

    @property
    def unmatched_names(self) -> List[str]:
        return [record.name for record in self.unmatched_records]


def _find(
    player: RosterPlayer,
    records: Sequence[StatRecord],
    used: List[bool],
    *,
    same_jersey: bool,
) -> Optional[int]:
    jersey = normalize_jersey(player.number)
    for index, record in enumerate(records):
        if used[index]:
            continue
        jersey_matches = normalize_jersey(record.jersey) == jersey
        if same_jersey:
            if jersey_matches and loose_name_match(player.first_name, player.last_name, record.name):
                return index
        elif not jersey_matches and exact_name_match(player.first_name, player.last_name, record.name):
            return index
    return None


def match_by_surname(
    stats_name: str,
    roster: Sequence[RosterPlayer],
    taken: Sequence[bool] = (),
) -> Optional[int]:
    """Roster position for a jersey-less "Last, First" record, or ``None``.

    Only roster entries not yet taken are candidates. A surname held by a
    single candidate is enough; otherwise the first name decides (exact,
    then either one a prefix of the other) before falling back to the first
    candidate with that surname.
    """

    if "," not in stats_name:
        return None
    last_key = normalize_name(stats_name.split(",", 1)[0])
    first_key = normalize_name(stats_name.split(",", 1)[1])
    if not last_key:
        return None
    candidates = [
        position
        for position, player in enumerate(roster)
        if not (position < len(taken) and taken[position]) and normalize_name(player.last_name) == last_key
    ]
    if len(candidates) <= 1:
        return candidates[0] if candidates else None
    for position in candidates:
        if normalize_name(roster[position].first_name) == first_key:
            return position
    for position in candidates:
        roster_first = normalize_name(roster[position].first_name)
        if roster_first.startswith(first_key) or first_key.startswith(roster_first):
            return position
    return candidates[0]


def match_players(roster: Sequence[RosterPlayer], records: Sequence[StatRecord]) -> MatchReport:
    """Pair every roster entry with at most one record, in roster order.

    All jersey matches are settled before any name-only match so that a
    renumbered athlete never takes a record that belongs to the current
    holder of that number.
    """

    used = [False] * len(records)
    matched: List[Optional[int]] = [None] * len(roster)

    for phase_same_jersey in (True, False):
        for position, player in enumerate(roster):
            if matched[position] is not None:
                continue
            index = _find(player, records, used, same_jersey=phase_same_jersey)
            if index is None:
                continue
            used[index] = True
            matched[position] = index
            if not phase_same_jersey:
                logger.debug(
                    "Matched %s by name across jerseys (%s -> %s)",
                    player.full_name,
                    records[index].jersey or "-",
                    player.number or "-",
                )

    taken = [index is not None for index in matched]
    for index, record in enumerate(records):
        if used[index] or normalize_jersey(record.jersey):
            continue
        position = match_by_surname(record.name, roster, taken)
        if position is None:
            continue
        used[index] = True
        taken[position] = True
        matched[position] = index
        logger.debug("Matched jersey-less record %r to %s by surname", record.name, roster[position].full_name)

    athletes = [
        MatchedAthlete(roster=player, stats=records[index] if index is not None else None)
        for player, index in zip(roster, matched)
    ]
    unmatched = [record for index, record in enumerate(records) if not used[index]]
    if unmatched:
        logger.info("%s stat record(s) matched no roster entry", len(unmatched))
    return MatchReport(athletes=athletes, unmatched_records=unmatched)
