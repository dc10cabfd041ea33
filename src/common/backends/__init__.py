"""Keyboard backend abstraction.

Backends deliver physical key events as KeyEvent objects; evdev (default)
and pynput are available.
"""

from .base import BackendNotAvailableError, KeyboardBackend
from .detector import create_backend
from .device_listing import list_keyboard_devices

__all__ = [
    'KeyboardBackend',
    'BackendNotAvailableError',
    'create_backend',
    'list_keyboard_devices',
]
