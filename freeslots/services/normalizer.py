from __future__ import annotations

from typing import Iterable

from freeslots.domain.value_objects.block import Block


def merge_blocks(blocks: Iterable[Block]) -> list[Block]:
    """Collapse busy blocks into a sorted list of disjoint, non-touching blocks.

    Blocks that overlap or merely touch (``end == next.start``) are joined,
    so no zero-width gap survives normalization.
    """
    ordered = sorted(blocks, key=lambda block: (block.start, block.end))
    if not ordered:
        return []

    merged: list[Block] = []
    current = ordered[0]
    for block in ordered[1:]:
        if block.start <= current.end:
            if block.end > current.end:
                current = Block(current.start, block.end)
            continue
        merged.append(current)
        current = block
    merged.append(current)
    return merged
