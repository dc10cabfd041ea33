"""Minimal key dispatcher.

The dispatcher receives `(character, modifiers, event)` calls and owns the
per-instance `recording` flag consulted by RecordingShim. Binding matching
and action execution are left to the `on_key` listener.
"""

from collections.abc import Callable
from typing import Any

from common.logging_utils import get_logger

KeyListener = Callable[[str, list[str], Any], None]


class KeyDispatcher:
    """Dispatch key events to an optional listener.

    Args:
        on_key: Callback receiving every dispatched (character, modifiers, event)
    """

    def __init__(self, on_key: KeyListener | None = None) -> None:
        self.on_key = on_key
        self.recording = False
        self.logger = get_logger('sequence_recorder.dispatcher')

    def handle_key(self, character: str, modifiers: list[str], event: Any) -> None:
        """Default entry point for key events."""
        self.logger.debug('%s %s (modifiers: %s)', event.type, character, modifiers)
        if self.on_key is not None:
            self.on_key(character, modifiers, event)
