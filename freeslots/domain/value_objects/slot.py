from __future__ import annotations

from typing import TYPE_CHECKING

from freeslots.domain.value_objects.period import BasePeriod

if TYPE_CHECKING:
    from freeslots.domain.value_objects.block import Block
    from freeslots.domain.value_objects.span import Span


class Slot(BasePeriod):
    """A free period produced by the finder."""

    @classmethod
    def between(cls, span: Span, block: Block) -> Slot:
        """Free time from the start of ``span`` up to the start of ``block``.

        Raises ``InvalidRange`` unless the block starts after the span does.
        """
        return cls(span.start, block.start)
