"""Touch input types and detection of touch capabilities from device metadata."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum


class AbsAxis(IntEnum):
    """Absolute axis codes reported by the kernel input layer."""

    ABS_X = 0x00
    ABS_Y = 0x01
    ABS_Z = 0x02
    ABS_RX = 0x03
    ABS_RY = 0x04
    ABS_HAT0X = 0x10
    ABS_HAT0Y = 0x11
    ABS_MT_SLOT = 0x2F
    ABS_MT_POSITION_X = 0x35
    ABS_MT_POSITION_Y = 0x36
    ABS_MT_TRACKING_ID = 0x39


class KeyCode(IntEnum):
    """Key and button codes relevant to touch detection."""

    BTN_LEFT = 0x110
    BTN_TOOL_FINGER = 0x145
    BTN_TOUCH = 0x14A


class PropType(IntEnum):
    """Input device property bits."""

    POINTER = 0x00
    DIRECT = 0x01
    BUTTONPAD = 0x02
    SEMI_MT = 0x03
    TOPBUTTONPAD = 0x04


@dataclass
class TouchSlot:
    """One contact slot: its tracking id and last known position."""

    tracking_id: int | None = None
    x: int | None = None
    y: int | None = None


@dataclass
class TouchRange:
    """Bounds of a touch axis: unknown, fixed by the device, or observed from events."""

    minimum: int | None = None
    maximum: int | None = None
    locked: bool = False

    @classmethod
    def fixed(cls, minimum: int, maximum: int) -> TouchRange:
        """Bounds reported by the device, never widened by events."""
        return cls(minimum, maximum, locked=True)

    def range(self) -> tuple[int, int] | None:
        """The (min, max) pair, or None while unknown."""
        if self.minimum is None or self.maximum is None:
            return None
        return self.minimum, self.maximum

    def is_known(self) -> bool:
        """Whether bounds are available."""
        return self.range() is not None

    def observe(self, value: int) -> None:
        """Widen observed bounds to include ``value``; fixed bounds stay put."""
        if self.locked:
            return
        if self.minimum is None or self.maximum is None:
            self.minimum = value
            self.maximum = value
            return
        self.minimum = min(self.minimum, value)
        self.maximum = max(self.maximum, value)


class MultiTouchSlots(Enum):
    """Whether a multi-touch device reports slots explicitly."""

    IMPLICIT_SINGLE = "implicit_single"
    EXPLICIT = "explicit"


class ModeKind(Enum):
    """Broad category of touch support."""

    NONE = "none"
    MULTI_TOUCH = "multi_touch"
    SINGLE_TOUCH = "single_touch"


@dataclass(frozen=True)
class TouchMode:
    """How a device reports touches."""

    kind: ModeKind
    slots: MultiTouchSlots | None = None
    contact_key: KeyCode | None = None

    @classmethod
    def none(cls) -> TouchMode:
        return cls(ModeKind.NONE)

    @classmethod
    def multi_touch(cls, slots: MultiTouchSlots) -> TouchMode:
        return cls(ModeKind.MULTI_TOUCH, slots=slots)

    @classmethod
    def single_touch(cls, contact_key: KeyCode | None) -> TouchMode:
        return cls(ModeKind.SINGLE_TOUCH, contact_key=contact_key)

    def axes(self) -> tuple[AbsAxis, AbsAxis] | None:
        """The position axes used by this mode."""
        if self.kind is ModeKind.MULTI_TOUCH:
            return AbsAxis.ABS_MT_POSITION_X, AbsAxis.ABS_MT_POSITION_Y
        if self.kind is ModeKind.SINGLE_TOUCH:
            return AbsAxis.ABS_X, AbsAxis.ABS_Y
        return None

    def is_touch_device(self) -> bool:
        return self.kind is not ModeKind.NONE

    def uses_explicit_slots(self) -> bool:
        return self.kind is ModeKind.MULTI_TOUCH and self.slots is MultiTouchSlots.EXPLICIT

    def slot_limit(self, detected_limit: int | None) -> int | None:
        """Number of slots the mode allows; None means unbounded."""
        if self.kind is ModeKind.NONE:
            return 0
        if self.uses_explicit_slots():
            return detected_limit
        return 1

    def slot_count(self, slot_limit: int | None) -> int:
        """Number of slots to allocate up front."""
        if self.kind is ModeKind.NONE:
            return 0
        return max(slot_limit if slot_limit is not None else 1, 1)

    def seeds_primary_tracking(self) -> bool:
        """Single touch without a contact key is always considered in contact."""
        return self.kind is ModeKind.SINGLE_TOUCH and self.contact_key is None


@dataclass(frozen=True)
class AxisInfo:
    """Reported bounds of one absolute axis."""

    minimum: int
    maximum: int


@dataclass(frozen=True)
class TouchCapabilities:
    """What a device reports about itself, as needed for touch detection.

    ``absolute_axes`` is None when the device has no absolute axes at all;
    ``abs_state`` is None when the axis state could not be read, with the
    reason in ``abs_state_error``.
    """

    absolute_axes: frozenset[int] | None = None
    keys: frozenset[int] | None = None
    properties: frozenset[int] = frozenset()
    abs_state: Mapping[int, AxisInfo] | None = None
    abs_state_error: str | None = None


@dataclass
class TouchBootstrap:
    """Initial touch configuration derived from device metadata."""

    mode: TouchMode
    slot_limit: int | None
    x_range: TouchRange
    y_range: TouchRange
    startup_warnings: list[str] = field(default_factory=list)


def update_tracking_id(slot: TouchSlot, tracking_id: int | None, clear_position: bool) -> None:
    """Set a slot's tracking id, forgetting its position on a new contact if asked."""
    slot.tracking_id = tracking_id
    if tracking_id is not None and clear_position:
        slot.x = None
        slot.y = None


def preferred_touch_contact_key(keys: Collection[int]) -> KeyCode | None:
    """The key that signals contact: BTN_TOUCH first, then BTN_TOOL_FINGER."""
    if KeyCode.BTN_TOUCH in keys:
        return KeyCode.BTN_TOUCH
    if KeyCode.BTN_TOOL_FINGER in keys:
        return KeyCode.BTN_TOOL_FINGER
    return None


def has_touch_properties(properties: Collection[int]) -> bool:
    """Whether any property marks the device as a touch surface."""
    return any(
        prop in properties
        for prop in (PropType.DIRECT, PropType.BUTTONPAD, PropType.SEMI_MT, PropType.TOPBUTTONPAD)
    )


def detect_touch_mode(
    absolute_axes: Collection[int] | None,
    keys: Collection[int] | None,
    properties: Collection[int],
) -> TouchMode | None:
    """Classify a device's touch mode; None when it has no absolute axes."""
    if absolute_axes is None:
        return None

    if AbsAxis.ABS_MT_POSITION_X in absolute_axes and AbsAxis.ABS_MT_POSITION_Y in absolute_axes:
        slots = (
            MultiTouchSlots.EXPLICIT
            if AbsAxis.ABS_MT_SLOT in absolute_axes
            else MultiTouchSlots.IMPLICIT_SINGLE
        )
        return TouchMode.multi_touch(slots)

    if AbsAxis.ABS_X in absolute_axes and AbsAxis.ABS_Y in absolute_axes:
        contact_key = preferred_touch_contact_key(keys) if keys is not None else None
        if contact_key is not None:
            return TouchMode.single_touch(contact_key)
        if has_touch_properties(properties):
            return TouchMode.single_touch(None)

    return TouchMode.none()


def inspect_touch_device(capabilities: TouchCapabilities) -> TouchBootstrap | None:
    """Work out the touch setup for a device, or None if it is not a touch device."""
    mode = detect_touch_mode(
        capabilities.absolute_axes, capabilities.keys, capabilities.properties
    )
    if mode is None or not mode.is_touch_device():
        return None

    warnings: list[str] = []
    abs_state = capabilities.abs_state
    if abs_state is None:
        detail = capabilities.abs_state_error or "axis state unavailable"
        warnings.append(
            "unable to load touch axis state; inferring touch bounds from incoming events: "
            f"{detail}"
        )

    def axis_state(axis: AbsAxis) -> AxisInfo | None:
        return abs_state.get(axis) if abs_state is not None else None

    x_range = TouchRange()
    y_range = TouchRange()
    slot_limit: int | None = None

    axes = mode.axes()
    if axes is not None:
        x_axis, y_axis = axes
        if (info := axis_state(x_axis)) is not None:
            x_range = TouchRange.fixed(info.minimum, info.maximum)
        if (info := axis_state(y_axis)) is not None:
            y_range = TouchRange.fixed(info.minimum, info.maximum)
        if mode.uses_explicit_slots() and (info := axis_state(AbsAxis.ABS_MT_SLOT)) is not None:
            slot_limit = max(info.maximum, 0) + 1

    if abs_state is not None and not (x_range.is_known() and y_range.is_known()):
        warnings.append(
            "touch position range is unavailable; inferring touch bounds from incoming events"
        )

    return TouchBootstrap(mode, slot_limit, x_range, y_range, warnings)