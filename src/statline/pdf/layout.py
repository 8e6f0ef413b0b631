"""Reconstruct ordered rows of positioned text from PDF bytes."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import pdfplumber
from pdfminer.psparser import PSException


logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"
DEFAULT_ROW_TOLERANCE = 3.0

# pdfplumber groups glyphs into words with these tolerances; the row
# tolerance applied afterwards is independent of them.
_WORD_X_TOLERANCE = 2
_WORD_Y_TOLERANCE = 3


@dataclass(frozen=True)
class PositionedToken:
    """A text run with its left edge and baseline in PDF user space."""

    text: str
    x: float
    y: float
    width: float

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class Row:
    tokens: Tuple[PositionedToken, ...]
    y: float
    page: int = 0

    def __iter__(self) -> Iterator[PositionedToken]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def texts(self) -> List[str]:
        return [token.text for token in self.tokens]

    @property
    def text(self) -> str:
        return " ".join(self.texts)


def is_pdf(data: bytes) -> bool:
    return data[: len(PDF_MAGIC)] == PDF_MAGIC


def group_rows(
    tokens: Iterable[PositionedToken],
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    *,
    page: int = 0,
) -> List[Row]:
    """Cluster tokens into rows, top of page first and left to right.

    Tokens are sorted by descending ``y`` then ascending ``x``; a token whose
    ``y`` is within ``tolerance`` of the previous token joins its row.
    """

    ordered = sorted((t for t in tokens if t.text.strip()), key=lambda t: (-t.y, t.x))
    rows: List[Row] = []
    current: List[PositionedToken] = []
    last_y: Optional[float] = None
    for token in ordered:
        if last_y is not None and abs(token.y - last_y) > tolerance:
            rows.append(_make_row(current, page))
            current = []
        current.append(token)
        last_y = token.y
    if current:
        rows.append(_make_row(current, page))
    return rows


def _make_row(tokens: Sequence[PositionedToken], page: int) -> Row:
    return Row(tokens=tuple(sorted(tokens, key=lambda t: t.x)), y=tokens[0].y, page=page)


def _word_to_token(word: Mapping[str, object], page_height: float) -> PositionedToken:
    x0 = float(word["x0"])  # type: ignore[arg-type]
    x1 = float(word["x1"])  # type: ignore[arg-type]
    bottom = float(word["bottom"])  # type: ignore[arg-type]
    return PositionedToken(text=str(word["text"]), x=x0, y=page_height - bottom, width=x1 - x0)


def extract_pages(data: bytes, tolerance: float = DEFAULT_ROW_TOLERANCE) -> List[List[Row]]:
    """Return the rows of every page, or an empty list for unreadable input."""

    if not is_pdf(data):
        logger.warning("Document does not start with %r; skipping layout extraction", PDF_MAGIC)
        return []
    pages: List[List[Row]] = []
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            for index, page in enumerate(pdf.pages):
                words = page.extract_words(
                    x_tolerance=_WORD_X_TOLERANCE,
                    y_tolerance=_WORD_Y_TOLERANCE,
                    keep_blank_chars=False,
                )
                tokens = [_word_to_token(word, float(page.height)) for word in words]
                pages.append(group_rows(tokens, tolerance, page=index))
    except (PSException, ValueError) as exc:
        logger.warning("Unable to read PDF layout: %s", exc)
        return []
    except Exception as exc:  # pragma: no cover - defensive logging only
        logger.warning("Unexpected error reading PDF layout: %s", exc)
        return []
    logger.debug("Extracted %s page(s) with %s row(s)", len(pages), sum(len(p) for p in pages))
    return pages


def extract_rows(
    data: bytes,
    tolerance: float = DEFAULT_ROW_TOLERANCE,
    *,
    pages: Optional[Sequence[int]] = None,
) -> List[Row]:
    """Flatten the rows of the selected pages (all pages by default)."""

    extracted = extract_pages(data, tolerance)
    selected = range(len(extracted)) if pages is None else [p for p in pages if 0 <= p < len(extracted)]
    rows: List[Row] = []
    for index in selected:
        rows.extend(extracted[index])
    return rows


def rows_to_text(rows: Iterable[Row]) -> str:
    return "\n".join(row.text for row in rows)


def extract_text(data: bytes, tolerance: float = DEFAULT_ROW_TOLERANCE) -> str:
    """Line-joined text: ``\\n`` between rows, single spaces inside a row."""

    return rows_to_text(extract_rows(data, tolerance))
