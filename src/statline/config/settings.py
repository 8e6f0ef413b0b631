"""Runtime settings resolved from ``STATLINE_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_ROW_TOLERANCE_ENV = "STATLINE_ROW_TOLERANCE"
_FETCH_TIMEOUT_ENV = "STATLINE_FETCH_TIMEOUT"
_GAP_MIN_ENV = "STATLINE_GAP_MIN"
_USER_AGENT_ENV = "STATLINE_USER_AGENT"
_WMT_BASE_URL_ENV = "STATLINE_WMT_BASE_URL"

_ROW_TOLERANCE_DEFAULT = 3.0
_FETCH_TIMEOUT_DEFAULT = 20.0
_GAP_MIN_DEFAULT = 5
_USER_AGENT_DEFAULT = "Mozilla/5.0 (compatible; statline/0.1)"
_WMT_BASE_URL_DEFAULT = "https://api.wmt.games/api/statistics"


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Settings:
    row_tolerance: float = _ROW_TOLERANCE_DEFAULT
    fetch_timeout: float = _FETCH_TIMEOUT_DEFAULT
    gap_min: int = _GAP_MIN_DEFAULT
    user_agent: str = _USER_AGENT_DEFAULT
    wmt_base_url: str = _WMT_BASE_URL_DEFAULT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            row_tolerance=_env_float(_ROW_TOLERANCE_ENV, _ROW_TOLERANCE_DEFAULT, clamp_min=0.5, clamp_max=10.0),
            fetch_timeout=_env_float(_FETCH_TIMEOUT_ENV, _FETCH_TIMEOUT_DEFAULT, clamp_min=1.0),
            gap_min=_env_int(_GAP_MIN_ENV, _GAP_MIN_DEFAULT, min_value=2),
            user_agent=os.getenv(_USER_AGENT_ENV) or _USER_AGENT_DEFAULT,
            wmt_base_url=(os.getenv(_WMT_BASE_URL_ENV) or _WMT_BASE_URL_DEFAULT).rstrip("/"),
        )
