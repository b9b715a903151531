"""Find free time slots inside a search window, around already scheduled events."""

from __future__ import annotations

from freeslots.domain.errors import InvalidRange, PeriodError
from freeslots.domain.interfaces.periods import Input, Output, Period
from freeslots.domain.value_objects.block import Block
from freeslots.domain.value_objects.period import BasePeriod, describe, describe_all
from freeslots.domain.value_objects.slot import Slot
from freeslots.domain.value_objects.span import Span
from freeslots.services.normalizer import merge_blocks
from freeslots.services.slot_finder import find, find_slots

__all__ = [
    "BasePeriod",
    "Block",
    "Input",
    "InvalidRange",
    "Output",
    "Period",
    "PeriodError",
    "Slot",
    "Span",
    "describe",
    "describe_all",
    "find",
    "find_slots",
    "merge_blocks",
]
