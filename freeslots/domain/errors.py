from __future__ import annotations

from typing import Any


class PeriodError(ValueError):
    """Base class for errors raised while building or handling periods."""


class InvalidRange(PeriodError):
    """Raised when a period would not start strictly before it ends."""

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__("Start time must be before end time.")
        self.start = start
        self.end = end
