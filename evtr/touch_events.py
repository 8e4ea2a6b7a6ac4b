"""Dispatch of raw input events to touch slot updates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol

from evtr.touch_types import AbsAxis, KeyCode


class EventType(IntEnum):
    """Input event types."""

    SYNCHRONIZATION = 0x00
    KEY = 0x01
    RELATIVE = 0x02
    ABSOLUTE = 0x03


@dataclass(frozen=True)
class InputEvent:
    """A single input event: type, code and value."""

    event_type: int
    code: int
    value: int


class SlotTarget(Enum):
    """Which slot an update applies to."""

    CURRENT = "current"
    PRIMARY = "primary"


class PositionAxis(Enum):
    """Which coordinate a position update sets."""

    X = "x"
    Y = "y"


class _TouchTarget(Protocol):
    def select_slot_value(self, value: int) -> None: ...

    def set_slot_tracking_id(
        self, target: SlotTarget, tracking_id: int | None, clear_position: bool
    ) -> None: ...

    def update_slot_position(self, target: SlotTarget, axis: PositionAxis, value: int) -> None: ...

    def arm_primary_slot_without_reset(self) -> None: ...


def apply_multi(state: _TouchTarget, event: InputEvent) -> None:
    """Apply a multi-touch protocol event to the current slot."""
    if event.event_type != EventType.ABSOLUTE:
        return

    code, value = event.code, event.value
    if code == AbsAxis.ABS_MT_SLOT:
        state.select_slot_value(value)
    elif code == AbsAxis.ABS_MT_TRACKING_ID:
        state.set_slot_tracking_id(SlotTarget.CURRENT, value if value >= 0 else None, True)
    elif code == AbsAxis.ABS_MT_POSITION_X:
        state.update_slot_position(SlotTarget.CURRENT, PositionAxis.X, value)
    elif code == AbsAxis.ABS_MT_POSITION_Y:
        state.update_slot_position(SlotTarget.CURRENT, PositionAxis.Y, value)


def apply_single(state: _TouchTarget, contact_key: KeyCode | None, event: InputEvent) -> None:
    """Apply a single-touch event to the primary slot."""
    if event.event_type == EventType.ABSOLUTE:
        if event.code == AbsAxis.ABS_X:
            state.update_slot_position(SlotTarget.PRIMARY, PositionAxis.X, event.value)
        elif event.code == AbsAxis.ABS_Y:
            state.update_slot_position(SlotTarget.PRIMARY, PositionAxis.Y, event.value)
        if contact_key is None:
            state.arm_primary_slot_without_reset()
    elif event.event_type == EventType.KEY and contact_key is not None:
        if event.code in (KeyCode.BTN_TOUCH, KeyCode.BTN_TOOL_FINGER):
            state.set_slot_tracking_id(
                SlotTarget.PRIMARY, 0 if event.value != 0 else None, True
            )