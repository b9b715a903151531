from __future__ import annotations

from typing import TYPE_CHECKING

from freeslots.domain.value_objects.period import BasePeriod

if TYPE_CHECKING:
    from freeslots.domain.value_objects.span import Span


class Block(BasePeriod):
    """An already scheduled, busy period."""

    def contains(self, span: Span) -> bool:
        return self.start <= span.start and span.end <= self.end

    def is_contained_in(self, span: Span) -> bool:
        return span.start <= self.start and self.end <= span.end

    def overlaps_at_start(self, span: Span) -> bool:
        # starts at or before the span and ends inside it
        return self.start <= span.start <= self.end <= span.end

    def overlaps_at_end(self, span: Span) -> bool:
        # starts inside the span and runs to or past its end
        return span.start <= self.start <= span.end <= self.end
