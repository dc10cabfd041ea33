"""Pynput-based keyboard backend.

This backend wraps pynput.keyboard.Listener for sessions where evdev is not
available (X11 without /dev/input access, macOS, Windows). pynput reports
auto-repeat as further presses, so a press of a key that is already held is
delivered with repeat=True. Events cannot be suppressed.
"""

from typing import Any, Callable

from common.key_event import KEYDOWN, KEYUP, KeyEvent
from common.key_normalizer import normalize_key
from common.logging_utils import get_logger

from .base import BackendNotAvailableError


def pynput_key_name(key: Any) -> str:
    """Convert a pynput Key/KeyCode to a canonical key name.

    Examples:
        >>> from pynput.keyboard import Key, KeyCode
        >>> pynput_key_name(Key.ctrl_l)
        'ctrl_l'
        >>> pynput_key_name(KeyCode.from_char('A'))
        'a'
    """
    name = normalize_key(key)
    if name.startswith('key.'):
        name = name[len('key.'):]
    return name


class PynputBackend:
    """Keyboard backend using pynput (no suppression)."""

    def __init__(self) -> None:
        """Initialize pynput backend.

        Raises:
            BackendNotAvailableError: If pynput library is not installed.
        """
        self.logger = get_logger('common.backend.pynput')
        self.listener: Any = None
        self._held: set[str] = set()

        try:
            import pynput  # noqa: F401
        except ImportError as e:
            raise BackendNotAvailableError(
                'pynput library is not installed. '
                'Install it with: pip install pynput'
            ) from e

        self.logger.debug('PynputBackend initialized successfully')

    def _press_event(self, key: Any) -> KeyEvent:
        name = pynput_key_name(key)
        repeat = name in self._held
        self._held.add(name)
        return KeyEvent(KEYDOWN, key=name, repeat=repeat)

    def _release_event(self, key: Any) -> KeyEvent:
        name = pynput_key_name(key)
        self._held.discard(name)
        return KeyEvent(KEYUP, key=name)

    def start(
        self,
        on_press: Callable[[KeyEvent], None],
        on_release: Callable[[KeyEvent], None]
    ) -> None:
        """Start listening for keyboard events using pynput (blocking)."""
        from pynput import keyboard

        self.logger.info('Starting pynput keyboard listener')
        self._held.clear()

        self.listener = keyboard.Listener(
            on_press=lambda key: on_press(self._press_event(key)),
            on_release=lambda key: on_release(self._release_event(key)),
        )
        self.listener.start()
        self.listener.join()

    def stop(self) -> None:
        if self.listener:
            self.logger.info('Stopping pynput keyboard listener')
            self.listener.stop()
            self.listener = None

    def get_backend_name(self) -> str:
        return 'pynput'

    def supports_suppression(self) -> bool:
        return False
