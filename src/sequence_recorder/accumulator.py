"""Key accumulator for the combo currently being recorded."""

from common.key_normalizer import is_character_key


class KeyAccumulator:
    """Set of key names pressed together in the open combo.

    Insertion order is remembered for display, but membership is what
    matters: a key held down across auto-repeat events is stored once.
    """

    def __init__(self) -> None:
        self._keys: dict[str, None] = {}
        self._has_character_key = False

    def add(self, key: str) -> bool:
        """Add a key name to the combo.

        Returns:
            bool: True if the key was new, False if it was already present
        """
        if key in self._keys:
            return False
        self._keys[key] = None
        if is_character_key(key):
            self._has_character_key = True
        return True

    def clear(self) -> None:
        self._keys.clear()
        self._has_character_key = False

    def contains(self, key: str) -> bool:
        return key in self._keys

    @property
    def has_character_key(self) -> bool:
        """Whether a single-character key was added since the last clear."""
        return self._has_character_key

    def keys(self) -> list[str]:
        """Return a snapshot of the accumulated keys in insertion order."""
        return list(self._keys)

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)
