"""Live touch contact tracking driven by input events."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from evtr.touch_events import InputEvent, PositionAxis, SlotTarget, apply_multi, apply_single
from evtr.touch_types import (
    ModeKind,
    TouchCapabilities,
    TouchMode,
    TouchRange,
    TouchSlot,
    inspect_touch_device,
    update_tracking_id,
)


def initialize_slots(slots: list[TouchSlot], mode: TouchMode) -> None:
    """Mark the primary slot as in contact for modes that never report contact."""
    if mode.seeds_primary_tracking() and slots:
        slots[0].tracking_id = 0


@dataclass
class TouchState:
    """Contact slots and axis bounds of a touch device."""

    mode: TouchMode
    slots: list[TouchSlot] = field(default_factory=list)
    slot_limit: int | None = None
    x_range: TouchRange = field(default_factory=TouchRange)
    y_range: TouchRange = field(default_factory=TouchRange)
    current_slot: int = 0

    @classmethod
    def disabled(cls) -> TouchState:
        """State for a device without touch support."""
        return cls.from_parts(TouchMode.none(), 0, TouchRange(), TouchRange())

    @classmethod
    def from_parts(
        cls,
        mode: TouchMode,
        slot_limit: int | None,
        x_range: TouchRange,
        y_range: TouchRange,
    ) -> TouchState:
        """Build a state for ``mode`` with the given slot limit and axis bounds."""
        limit = mode.slot_limit(slot_limit)
        slots = [TouchSlot() for _ in range(mode.slot_count(limit))]
        initialize_slots(slots, mode)
        return cls(
            mode=mode,
            slots=slots,
            slot_limit=limit,
            x_range=dataclasses.replace(x_range),
            y_range=dataclasses.replace(y_range),
        )

    @classmethod
    def from_capabilities(
        cls, capabilities: TouchCapabilities
    ) -> tuple[TouchState, list[str]]:
        """Detect touch support and return the state with any startup warnings."""
        bootstrap = inspect_touch_device(capabilities)
        if bootstrap is None:
            return cls.disabled(), []
        state = cls.from_parts(
            bootstrap.mode, bootstrap.slot_limit, bootstrap.x_range, bootstrap.y_range
        )
        return state, list(bootstrap.startup_warnings)

    def enabled(self) -> bool:
        """Whether both axis bounds are known, so touches can be drawn."""
        return self.x_range.is_known() and self.y_range.is_known()

    def is_touch_device(self) -> bool:
        return self.mode.is_touch_device()

    def x_bounds(self) -> tuple[int, int] | None:
        return self.x_range.range()

    def y_bounds(self) -> tuple[int, int] | None:
        return self.y_range.range()

    def ranges(self) -> tuple[tuple[int, int], tuple[int, int]] | None:
        """Both axis bounds, or None unless both are known."""
        x_bounds = self.x_bounds()
        y_bounds = self.y_bounds()
        if x_bounds is None or y_bounds is None:
            return None
        return x_bounds, y_bounds

    def active_points(self) -> list[tuple[int, int]]:
        """Positions of slots currently in contact."""
        return self._points_by_tracking_state(True)

    def inactive_points(self) -> list[tuple[int, int]]:
        """Last positions of slots no longer in contact."""
        return self._points_by_tracking_state(False)

    def update(self, event: InputEvent) -> None:
        """Apply one input event."""
        if not self.is_touch_device():
            return
        if self.mode.kind is ModeKind.MULTI_TOUCH:
            apply_multi(self, event)
        elif self.mode.kind is ModeKind.SINGLE_TOUCH:
            apply_single(self, self.mode.contact_key, event)

    def select_slot_value(self, value: int) -> None:
        """Switch the current slot if the index is supported."""
        if value < 0:
            return
        if self.slot_limit is None or value < self.slot_limit:
            self.current_slot = value
            self._ensure_slot_capacity()

    def set_slot_tracking_id(
        self, target: SlotTarget, tracking_id: int | None, clear_position: bool
    ) -> None:
        slot = self._slot(target)
        if slot is not None:
            update_tracking_id(slot, tracking_id, clear_position)

    def arm_primary_slot_without_reset(self) -> None:
        self.set_slot_tracking_id(SlotTarget.PRIMARY, 0, False)

    def update_slot_position(self, target: SlotTarget, axis: PositionAxis, value: int) -> None:
        """Set one coordinate of a slot and widen observed bounds."""
        slot = self._slot(target)
        if slot is not None:
            if axis is PositionAxis.X:
                slot.x = value
            else:
                slot.y = value
        if axis is PositionAxis.X:
            self.x_range.observe(value)
        else:
            self.y_range.observe(value)

    def _points_by_tracking_state(self, active: bool) -> list[tuple[int, int]]:
        if not self.is_touch_device():
            return []
        return [
            (slot.x, slot.y)
            for slot in self.slots
            if (slot.tracking_id is not None) == active
            and slot.x is not None
            and slot.y is not None
        ]

    def _slot(self, target: SlotTarget) -> TouchSlot | None:
        if target is SlotTarget.PRIMARY:
            return self.slots[0] if self.slots else None
        self._ensure_slot_capacity()
        if self.current_slot < len(self.slots):
            return self.slots[self.current_slot]
        return None

    def _ensure_slot_capacity(self) -> None:
        limit = self.slot_limit
        if limit == 0:
            return
        if limit is not None:
            if self.current_slot >= limit:
                self.current_slot = limit - 1
            wanted = min(self.current_slot + 1, limit)
        else:
            wanted = self.current_slot + 1
        while len(self.slots) < wanted:
            self.slots.append(TouchSlot())