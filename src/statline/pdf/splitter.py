"""Recover numeric columns that the text layer fused into one digit run.

Some stat sheets print adjacent single-digit columns so close together that
the extracted text carries them as one token (``"372013"`` for runs, hits,
doubles, triples, home runs and extra-base hits). The helpers here split
such runs back into their columns using only baseball arithmetic: every
split of the digits into 1-2 digit groups is enumerated, impossible ones are
filtered out by predicates, and the survivors are ranked by a score.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Tuple


Partition = Tuple[int, ...]
Predicate = Callable[[Partition], bool]

_SLUGGING_SUFFIX = re.compile(r"^(.*?)(\d?\.\d{3})$")


class BattingRun(NamedTuple):
    r: int
    h: int
    doubles: int
    triples: int
    hr: int


class PitchingRun(NamedTuple):
    h: int
    r: int
    er: int
    bb: Optional[int] = None
    so: Optional[int] = None


def iter_partitions(digits: str, arity: int, max_width: int = 2) -> Iterator[Partition]:
    """Yield every split of ``digits`` into ``arity`` groups, narrowest first."""

    if arity <= 0:
        if not digits:
            yield ()
        return
    remaining = arity - 1
    for width in range(1, max_width + 1):
        rest = digits[width:]
        if len(digits) < width:
            break
        if not remaining <= len(rest) <= remaining * max_width:
            continue
        head = int(digits[:width])
        for tail in iter_partitions(rest, remaining, max_width):
            yield (head,) + tail


def search_partitions(
    digits: str,
    arity: int,
    *,
    max_width: int = 2,
    predicates: Sequence[Predicate] = (),
    score: Optional[Callable[[Partition], float]] = None,
) -> Optional[Partition]:
    """Return the best partition satisfying every predicate, or ``None``.

    Candidates are ranked by ``score`` (highest wins); among equal scores the
    first one enumerated is kept.
    """

    if not digits.isdigit():
        return None
    candidates: List[Partition] = [
        candidate
        for candidate in iter_partitions(digits, arity, max_width)
        if all(predicate(candidate) for predicate in predicates)
    ]
    if not candidates:
        return None
    if score is None:
        return candidates[0]
    return max(candidates, key=score)


def split_batting_run(merged: str, at_bats: int) -> Optional[BattingRun]:
    """Split a fused R+H+2B+3B+HR(+XB) run.

    The six-group reading is only accepted when the trailing extra-base
    count equals 2B+3B+HR; otherwise the five-group reading is tried. Ties
    go to the candidate with the most hits.
    """

    if len(merged) < 4 or not merged.isdigit():
        return None
    max_runs = max(at_bats, 100)
    max_hits = at_bats if at_bats > 0 else 50
    bounds: List[Predicate] = [
        lambda p: p[0] <= max_runs,
        lambda p: p[1] <= max_hits,
        lambda p: p[2] <= p[1] and p[3] <= p[1] and p[4] <= p[1],
        lambda p: p[2] + p[3] + p[4] <= p[1],
    ]

    def hits(p: Partition) -> float:
        return p[1]

    if len(merged) >= 6:
        verified = search_partitions(
            merged,
            6,
            predicates=bounds + [lambda p: p[5] == p[2] + p[3] + p[4]],
            score=hits,
        )
        if verified is not None:
            return BattingRun(*verified[:5])
    if len(merged) < 5:
        return None
    found = search_partitions(merged, 5, predicates=bounds, score=hits)
    return BattingRun(*found) if found is not None else None


def total_bases(h: int, doubles: int, triples: int, hr: int) -> int:
    return h + doubles + 2 * triples + 3 * hr


def extract_rbi(merged: str, known_total_bases: Optional[int]) -> Optional[int]:
    """Read RBI from a fused RBI+TB(+SLG) token by stripping known suffixes."""

    if not merged:
        return None
    match = _SLUGGING_SUFFIX.match(merged)
    number = match.group(1) if match else merged
    if not number:
        return None
    if known_total_bases is not None:
        suffix = str(known_total_bases)
        if number.endswith(suffix) and len(number) > len(suffix):
            number = number[: -len(suffix)]
    elif len(number) > 2:
        return None
    return int(number) if number.isdigit() else None


def split_steals(merged: str) -> Optional[Tuple[int, int]]:
    """Split ``SB-ATT`` where trailing digits from the next column may follow.

    Attempts use as many digits as steals, or one more, and never fall
    below steals.
    """

    dash = merged.find("-")
    if dash <= 0:
        return None
    prefix = merged[:dash]
    after = merged[dash + 1:]
    if not prefix.isdigit():
        return None
    steals = int(prefix)
    longest = min(len(prefix) + 1, len(after))
    for length in range(len(prefix), longest + 1):
        candidate = after[:length]
        if candidate.isdigit() and int(candidate) >= steals:
            return steals, int(candidate)
    return None


def split_innings(merged: str) -> Optional[Tuple[str, str]]:
    """Cut innings pitched (one digit after the point) off a fused run."""

    dot = merged.find(".")
    if dot < 0:
        return None
    end = dot + 2
    if end > len(merged):
        return None
    return merged[:end], merged[end:]


def split_pitching_run(rest: str, arity: int = 5) -> Optional[PitchingRun]:
    """Split H+R+ER(+BB+K) with ER <= R, preferring ER closest to R."""

    if arity not in (3, 5):
        raise ValueError(f"Unsupported pitching arity {arity}")
    found = search_partitions(
        rest,
        arity,
        predicates=[lambda p: p[2] <= p[1]],
        score=lambda p: -abs(p[2] - p[1]),
    )
    return PitchingRun(*found) if found is not None else None
