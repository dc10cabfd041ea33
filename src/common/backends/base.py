"""Base keyboard backend abstraction using Protocol.

This module defines the KeyboardBackend protocol that all backends must implement.
Backends hand every physical key event to the callbacks as a KeyEvent; after a
callback returns, a backend that can suppress events checks
`event.default_prevented` before passing the event on to the system.
"""

from typing import Callable, Protocol

from common.key_event import KeyEvent


class KeyboardBackend(Protocol):
    """Protocol for keyboard event sources.

    No explicit inheritance required - structural subtyping.

    Example:
        class MyBackend:
            def start(self, on_press, on_release) -> None: ...
            def stop(self) -> None: ...
            def get_backend_name(self) -> str: ...
            def supports_suppression(self) -> bool: ...
    """

    def start(
        self,
        on_press: Callable[[KeyEvent], None],
        on_release: Callable[[KeyEvent], None]
    ) -> None:
        """Start listening for keyboard events (blocking call).

        Args:
            on_press: Callback for key press events, including auto-repeat
                presses (KeyEvent.repeat is True for those).
            on_release: Callback for key release events.

        Note:
            KeyEvent.key carries the canonical key name ('ctrl_l', 'a',
            'delete') regardless of the underlying backend.
        """
        ...

    def stop(self) -> None:
        """Stop listening for keyboard events.

        This method should cause start() to unblock and return.
        """
        ...

    def get_backend_name(self) -> str:
        """Return the name of this backend for logging and debugging."""
        ...

    def supports_suppression(self) -> bool:
        """Return True if KeyEvent.prevent_default() keeps events from the system."""
        ...


class BackendNotAvailableError(Exception):
    """Raised when a backend cannot be initialized.

    This can happen for various reasons:
    - Required library not installed (e.g., evdev)
    - No suitable input devices found (for evdev)
    - Permission denied (for evdev /dev/input/ access)

    The error message should provide actionable guidance for the user.
    """
