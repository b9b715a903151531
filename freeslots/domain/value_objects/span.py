from __future__ import annotations

from freeslots.domain.value_objects.block import Block
from freeslots.domain.value_objects.period import BasePeriod
from freeslots.domain.value_objects.slot import Slot


class Span(BasePeriod):
    """The search window every returned slot lies within."""

    def clip(self, block: Block) -> Block | None:
        if not self.overlaps(block):
            return None
        return Block(max(self.start, block.start), min(self.end, block.end))

    def to_slot(self) -> Slot:
        return Slot(self.start, self.end)
