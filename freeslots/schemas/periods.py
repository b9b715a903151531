from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ValidationInfo, field_validator

from freeslots.domain.value_objects.block import Block
from freeslots.domain.value_objects.slot import Slot


class BusyPeriodIn(BaseModel):
    start_at: datetime
    end_at: datetime
    title: str | None = None

    @field_validator("end_at")
    @classmethod
    def validate_range(cls, end_at: datetime, info: ValidationInfo):
        start_at = info.data.get("start_at")
        if start_at is None:
            return end_at
        try:
            inverted = end_at <= start_at
        except TypeError:
            raise ValueError("start_at and end_at must share timezone awareness") from None
        if inverted:
            raise ValueError("end_at must be after start_at")
        return end_at

    @property
    def start(self) -> datetime:
        return self.start_at

    @property
    def end(self) -> datetime:
        return self.end_at

    def to_block(self) -> Block:
        return Block(self.start_at, self.end_at)


class AvailableSlotOut(BaseModel):
    start_at: datetime
    end_at: datetime
    duration_minutes: int

    @property
    def start(self) -> datetime:
        return self.start_at

    @property
    def end(self) -> datetime:
        return self.end_at

    @classmethod
    def create_from_slot(cls, slot: Slot) -> "AvailableSlotOut":
        return cls(
            start_at=slot.start,
            end_at=slot.end,
            duration_minutes=int(slot.duration.total_seconds() // 60),
        )
