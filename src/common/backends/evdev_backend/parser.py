from __future__ import annotations

from typing import Any

from evdev import ecodes, categorize

from ..key_mapping import evdev_to_key_name
from .types import ParsedEvent


def parse_event(device: Any, event: Any) -> ParsedEvent | None:
    """Parse raw evdev event into ParsedEvent.

    Returns None for non-keyboard events. Keys without a canonical name are
    returned with key_name=None and passed through untouched by the processor.
    """
    if event.type != ecodes.EV_KEY:
        return None
    key_event = categorize(event)
    device_id = device.fileno() if hasattr(device, 'fileno') else id(device)
    key_name: str | None
    try:
        key_name = evdev_to_key_name(key_event.keycode)
    except KeyError:
        key_name = None
    return ParsedEvent(device_id, (device_id, event.code), event.code, event.value, key_name)
