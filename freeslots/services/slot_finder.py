from __future__ import annotations

from typing import Iterable, TypeVar

from freeslots.core.logging import log
from freeslots.domain.errors import PeriodError
from freeslots.domain.interfaces.periods import Input, Output
from freeslots.domain.value_objects.block import Block
from freeslots.domain.value_objects.slot import Slot
from freeslots.domain.value_objects.span import Span
from freeslots.services.normalizer import merge_blocks

OutT = TypeVar("OutT", bound=Output)


def find_slots(span: Span, blocks: Iterable[Block]) -> list[Slot]:
    """Return the free slots of ``span`` not covered by any of ``blocks``.

    Slots come back in chronological order, are pairwise disjoint and never
    touch each other. Blocks lying wholly outside the span are ignored.
    """
    merged = merge_blocks(blocks)

    slots: list[Slot] = []
    cursor = span.start
    for block in merged:
        if cursor >= span.end:
            break
        if block.end <= cursor or block.start >= span.end:
            continue
        if block.start > cursor:
            slots.append(Slot(cursor, block.start))
        cursor = max(cursor, block.end)

    if cursor < span.end:
        slots.append(Slot(cursor, span.end))

    log.debug("slots_found", span_start=span.start, span_end=span.end, busy=len(merged), slots=len(slots))
    return slots


def find(span: Span, inputs: Iterable[Input], output: type[OutT]) -> list[OutT]:
    """Find free time in ``span`` around caller records.

    Each record in ``inputs`` is converted with ``to_block()``; every free
    slot is handed to ``output.create_from_slot()``. Records from different
    schedules must not be mixed in a single call.
    """
    blocks: list[Block] = []
    for record in inputs:
        try:
            blocks.append(record.to_block())
        except PeriodError as exc:
            log.warning("busy_record_rejected", record=repr(record), error=str(exc))
            raise
    return [output.create_from_slot(slot) for slot in find_slots(span, blocks)]
