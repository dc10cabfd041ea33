from __future__ import annotations

from typing import Set

from .types import KeyRef


class KeyState:
    """Tracks which presses were passed on to the system.

    A release is emitted exactly when its press was emitted, whatever the
    release callback decides, so a suppressed press never leaves a dangling
    release and an emitted press is never left stuck.
    """

    def __init__(self) -> None:
        self.emitted: Set[KeyRef] = set()
        self.swallowed: Set[KeyRef] = set()

    def register_emitted(self, ref: KeyRef) -> None:
        self.swallowed.discard(ref)
        self.emitted.add(ref)

    def register_swallowed(self, ref: KeyRef) -> None:
        if ref not in self.emitted:
            self.swallowed.add(ref)

    def release(self, ref: KeyRef) -> bool:
        """Forget a key on release.

        Returns:
            True if the release must be emitted to the system
        """
        self.swallowed.discard(ref)
        if ref in self.emitted:
            self.emitted.discard(ref)
            return True
        return False

    def is_swallowed(self, ref: KeyRef) -> bool:
        return ref in self.swallowed

    def clear(self) -> None:
        self.emitted.clear()
        self.swallowed.clear()
