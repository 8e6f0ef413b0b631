"""Exception types raised across statline layers."""

from __future__ import annotations

from typing import Sequence


class StatlineError(Exception):
    """Base class for errors surfaced to callers."""


class UnsupportedSport(StatlineError, KeyError):
    """Raised when a sport key has no registered configuration."""

    def __init__(self, sport: str) -> None:
        super().__init__(sport)
        self.sport = sport

    def __str__(self) -> str:
        return f"Unsupported sport '{self.sport}'"


class SourceUnavailable(StatlineError, RuntimeError):
    """Raised after every candidate source failed to fetch or validate."""

    def __init__(self, attempted: Sequence[str], reason: str | None = None) -> None:
        self.attempted = list(attempted)
        self.reason = reason
        message = f"No valid source among {len(self.attempted)} candidate(s)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
