"""Discovery, selector and monitor state, touch tracking and layout helpers for evdev input devices."""

__version__ = "0.1.0"