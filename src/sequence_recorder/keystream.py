"""Translate backend key events into dispatcher calls.

Backends report one canonical key name per event ('ctrl_l', 'a', 'delete').
ModifierTracking folds left/right modifier variants to a single name and
annotates every event with the modifiers held at that moment.
"""

from collections.abc import Callable
from typing import Any

from common.key_normalizer import normalize_key

from .models import KEYDOWN
from .models import KeyEvent

MODIFIER_NAMES: dict[str, str] = {
    'ctrl': 'ctrl', 'ctrl_l': 'ctrl', 'ctrl_r': 'ctrl',
    'alt': 'alt', 'alt_l': 'alt', 'alt_r': 'alt', 'alt_gr': 'alt',
    'shift': 'shift', 'shift_l': 'shift', 'shift_r': 'shift',
    'super': 'meta', 'super_l': 'meta', 'super_r': 'meta',
    'cmd': 'meta', 'cmd_l': 'meta', 'cmd_r': 'meta',
}

# order in which held modifiers are reported
MODIFIER_ORDER = ('ctrl', 'alt', 'shift', 'meta')

KeyHandler = Callable[[str, list[str], Any], None]


def fold_key_name(key: Any) -> str:
    """Return the dispatcher name for a backend key name.

    Examples:
        >>> fold_key_name('ctrl_r')
        'ctrl'
        >>> fold_key_name('A')
        'a'
    """
    name = normalize_key(key)
    return MODIFIER_NAMES.get(name, name)


class ModifierTracking:
    """Track held modifiers and forward events as (character, modifiers, event).

    The same modifier may be held on both sides of the keyboard; it stays
    active until both are released.

    Args:
        target: Handler called for every event, typically RecordingShim.handle_key
    """

    def __init__(self, target: KeyHandler) -> None:
        self.target = target
        self._held: dict[str, set[str]] = {name: set() for name in MODIFIER_ORDER}

    def active_modifiers(self) -> list[str]:
        return [name for name in MODIFIER_ORDER if self._held[name]]

    def on_event(self, event: KeyEvent) -> None:
        raw = normalize_key(event.key)
        character = fold_key_name(raw)
        is_modifier = character in self._held

        if event.type == KEYDOWN:
            if is_modifier:
                self._held[character].add(raw)
            self.target(character, self.active_modifiers(), event)
        else:
            self.target(character, self.active_modifiers(), event)
            if is_modifier:
                self._held[character].discard(raw)

    def on_press(self, event: KeyEvent) -> None:
        self.on_event(event)

    def on_release(self, event: KeyEvent) -> None:
        self.on_event(event)

    def reset(self) -> None:
        for held in self._held.values():
            held.clear()
