"""Jersey normalization and the jersey to display-slot contract."""

from __future__ import annotations

from typing import Optional

SLOT_COUNT = 99
ZERO_SLOT = 90
DOUBLE_ZERO_SLOT = 99
_UNSLOTTED = SLOT_COUNT + 1


def _clean(value: object) -> str:
    return str(value if value is not None else "").strip().lstrip("#").strip()


def normalize_jersey(value: object) -> str:
    """Canonical jersey text: "0" and "00" stay distinct, "07" becomes "7"."""

    text = _clean(value)
    if text in ("0", "00"):
        return text
    if text.isdigit():
        return str(int(text))
    return text


def jersey_to_slot(value: object) -> Optional[int]:
    """Map a jersey to its natural slot, or ``None`` when it has none.

    "0" sits in slot 90 and "00" in slot 99; 1 through 98 keep their number.
    Everything else, 99 included, is invalid.
    """

    text = _clean(value)
    if text == "0":
        return ZERO_SLOT
    if text == "00":
        return DOUBLE_ZERO_SLOT
    if not text.isdigit():
        return None
    number = int(text)
    if 1 <= number <= 98:
        return number
    return None


def slot_label(slot: int) -> str:
    if slot == ZERO_SLOT:
        return "0"
    if slot == DOUBLE_ZERO_SLOT:
        return "00"
    return str(slot)


def slot_sort_key(jersey: object) -> int:
    slot = jersey_to_slot(jersey)
    return slot if slot is not None else _UNSLOTTED
