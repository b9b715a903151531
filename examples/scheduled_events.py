from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from freeslots import Block, Slot, Span, describe, describe_all, find
from freeslots.core.logging import configure_logging, log


@dataclass
class ScheduledEvent:
    start_at: datetime
    end_at: datetime

    @property
    def start(self) -> datetime:
        return self.start_at

    @property
    def end(self) -> datetime:
        return self.end_at

    def to_block(self) -> Block:
        return Block(self.start_at, self.end_at)


@dataclass
class AvailableSlot:
    start_at: datetime
    end_at: datetime

    @property
    def start(self) -> datetime:
        return self.start_at

    @property
    def end(self) -> datetime:
        return self.end_at

    @classmethod
    def create_from_slot(cls, slot: Slot) -> "AvailableSlot":
        return cls(start_at=slot.start, end_at=slot.end)


def main() -> None:
    configure_logging()
    now = datetime.now(timezone(timedelta(hours=9)))

    # usually parsed from a request
    span = Span(now, now + timedelta(hours=8))
    # usually loaded from storage
    events = [
        ScheduledEvent(start_at=now + timedelta(hours=1), end_at=now + timedelta(hours=2)),
        ScheduledEvent(start_at=now + timedelta(hours=3), end_at=now + timedelta(hours=4)),
    ]

    slots = find(span, events, AvailableSlot)
    log.info("example_finished", slots=len(slots))
    print(f"Span:\n {describe(span)}\n")
    print(f"Blocks:\n {describe_all(events)}\n")
    print(f"Slots:\n {describe_all(slots)}\n")


if __name__ == "__main__":
    main()
