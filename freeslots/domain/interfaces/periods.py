from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from freeslots.domain.value_objects.block import Block
    from freeslots.domain.value_objects.slot import Slot

_OutT = TypeVar("_OutT", bound="Output")


@runtime_checkable
class Period(Protocol):
    """Anything exposing a start and an end instant, with start < end."""

    @property
    def start(self) -> Any:
        ...

    @property
    def end(self) -> Any:
        ...


@runtime_checkable
class Input(Period, Protocol):
    """Caller record that can be turned into a busy Block."""

    def to_block(self) -> Block:
        ...


@runtime_checkable
class Output(Period, Protocol):
    """Caller record that can be built from a free Slot."""

    @classmethod
    def create_from_slot(cls: type[_OutT], slot: Slot) -> _OutT:
        ...
