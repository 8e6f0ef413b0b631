"""Assign the tokens of a row to named fields by x position."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from statline.config.layouts import ColumnLayout, ColumnRange

from .layout import PositionedToken, Row


def _position(token: PositionedToken, round_x: bool) -> float:
    return float(round(token.x)) if round_x else token.x


def first_in_range(tokens: Iterable[PositionedToken], column: ColumnRange, *, round_x: bool = True) -> str:
    for token in tokens:
        if column.contains(_position(token, round_x)):
            return token.text
    return ""


def join_range(
    tokens: Iterable[PositionedToken],
    column: ColumnRange,
    *,
    sep: str = " ",
    round_x: bool = True,
) -> str:
    parts = [t.text for t in tokens if column.contains(_position(t, round_x))]
    return sep.join(parts).strip()


def map_row(row: Row | Sequence[PositionedToken], layout: ColumnLayout, *, joined: Iterable[str] = ("name",)) -> Dict[str, str]:
    """Map each layout field to the first token in its range.

    Fields listed in ``joined`` collect every token in range instead, which
    keeps multi-word names intact. Values are returned as printed; shape
    validation is left to the caller.
    """

    tokens = list(row)
    joined_fields = set(joined)
    values: Dict[str, str] = {}
    for column in layout.columns:
        if column.field in joined_fields:
            values[column.field] = join_range(tokens, column, round_x=layout.round_x)
        else:
            values[column.field] = first_in_range(tokens, column, round_x=layout.round_x)
    return values


def tokenize_row(
    row: Row | Sequence[PositionedToken],
    gap: float,
    breaks: Sequence[float] = (),
) -> List[PositionedToken]:
    """Glue runs separated by at most ``gap`` units back into one token.

    A token never grows across one of the ``breaks`` x positions, so two
    columns that happen to touch stay apart.
    """

    tokens = sorted(row, key=lambda t: t.x)
    if not tokens:
        return []
    merged: List[PositionedToken] = []
    current = tokens[0]
    for token in tokens[1:]:
        crosses = any(current.x < brk <= token.x for brk in breaks)
        if token.x - current.right > gap or crosses:
            merged.append(current)
            current = token
        else:
            current = PositionedToken(
                text=current.text + token.text,
                x=current.x,
                y=current.y,
                width=token.right - current.x,
            )
    merged.append(current)
    return merged


def collect_regions(tokens: Iterable[PositionedToken], layout: ColumnLayout) -> Dict[str, List[str]]:
    """Group the text of every token by the region its left edge falls in."""

    values: Dict[str, List[str]] = {column.field: [] for column in layout.columns}
    for token in tokens:
        text = token.text.strip()
        if not text:
            continue
        position = _position(token, layout.round_x)
        for column in layout.columns:
            if column.contains(position):
                values[column.field].append(text)
                break
    return values


def concat_regions(tokens: Iterable[PositionedToken], layout: ColumnLayout) -> Dict[str, str]:
    """Concatenate the text of every token that starts inside each region."""

    return {name: "".join(parts) for name, parts in collect_regions(tokens, layout).items()}
