from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Iterable, TypeVar

from freeslots.core.config import settings
from freeslots.domain.errors import InvalidRange

if TYPE_CHECKING:
    from freeslots.domain.interfaces.periods import Period

_P = TypeVar("_P", bound="BasePeriod")


@dataclass(frozen=True, order=True)
class BasePeriod:
    """Half-open range ``[start, end)`` with ``start < end``.

    Equality and ordering compare ``(start, end)`` and only hold between
    instances of the same concrete class.
    """

    start: Any
    end: Any

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise InvalidRange(self.start, self.end)

    @classmethod
    def from_period(cls: type[_P], period: Period) -> _P:
        return cls(period.start, period.end)

    @property
    def duration(self) -> Any:
        return self.end - self.start

    def overlaps(self, other: Period) -> bool:
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return describe(self)


def _format_instant(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime(settings.DATETIME_FORMAT)
    return str(value)


def describe(period: Period) -> str:
    """Render a period as ``start: ..., end: ..., duration: 8h 0m``."""
    duration = period.end - period.start
    if isinstance(duration, timedelta):
        hours, minutes = divmod(int(duration.total_seconds() // 60), 60)
        rendered = f"{hours}h {minutes}m"
    else:
        rendered = str(duration)
    return (
        f"start: {_format_instant(period.start)}, "
        f"end: {_format_instant(period.end)}, "
        f"duration: {rendered}"
    )


def describe_all(periods: Iterable[Period]) -> str:
    return "\n ".join(describe(period) for period in periods)
