"""Derived joystick and hat state for the monitor view."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AbsoluteAxis:
    """Snapshot of an absolute axis: its bounds and current value."""

    minimum: int
    maximum: int
    value: int


@dataclass(frozen=True)
class StickState:
    """One analogue stick made of an x and a y axis."""

    x: AbsoluteAxis
    y: AbsoluteAxis


@dataclass(frozen=True)
class JoystickState:
    """Up to two analogue sticks."""

    left: StickState | None = None
    right: StickState | None = None

    @classmethod
    def from_axes(
        cls,
        left: tuple[AbsoluteAxis, AbsoluteAxis] | None,
        right: tuple[AbsoluteAxis, AbsoluteAxis] | None,
    ) -> JoystickState:
        """Build the state from optional (x, y) axis pairs."""
        return cls(
            left=StickState(*left) if left is not None else None,
            right=StickState(*right) if right is not None else None,
        )

    def count(self) -> int:
        """Number of sticks present."""
        return (self.left is not None) + (self.right is not None)


def sign(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass(frozen=True)
class HatState:
    """Direction of a d-pad hat, each component in {-1, 0, 1}."""

    x: int
    y: int

    @classmethod
    def from_axes(cls, x: AbsoluteAxis, y: AbsoluteAxis, invert_y: bool) -> HatState:
        """Reduce hat axes to their direction signs."""
        y_sign = sign(y.value)
        return cls(x=sign(x.value), y=-y_sign if invert_y else y_sign)