"""Device-originated events."""

from .events import (
    KEY_DOWN,
    KEY_UP,
    ConnectEvent,
    DeviceEvent,
    Event,
    KeyEvent,
    parse_event,
)

__all__ = [
    "KEY_DOWN",
    "KEY_UP",
    "ConnectEvent",
    "DeviceEvent",
    "Event",
    "KeyEvent",
    "parse_event",
]
