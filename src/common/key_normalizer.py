"""Key normalization utilities for sequence recording.

This module operates on key names (str) as reported by the dispatcher.
Names longer than one character ("ctrl", "shift", "enter", "f1") are
modifier/named keys; single-character names ("a", "7", "/") are character keys.
"""

from collections.abc import Iterable
from typing import Any

COMBO_SEPARATOR = '+'


def normalize_key(key: Any) -> str:
    """Normalize a key to its canonical string name.

    Args:
        key: Key name (str) or character-like object (pynput KeyCode, Key)

    Returns:
        str: Canonical key name (e.g., "ctrl_l", "a", "f1")

    Examples:
        >>> normalize_key('ctrl_l')
        'ctrl_l'
        >>> normalize_key('A')
        'a'
    """
    if isinstance(key, str):
        return key.lower()
    if hasattr(key, 'char') and getattr(key, 'char'):
        return str(getattr(key, 'char')).lower()
    if hasattr(key, 'name') and getattr(key, 'name'):
        return str(getattr(key, 'name')).lower()
    return str(key).lower()


def is_modifier_key(key: str) -> bool:
    """Check if a key name is a modifier/named key.

    Any name longer than one character counts, so "enter" and "f1" sort with
    "ctrl" and "shift" ahead of character keys.
    """
    return len(key) > 1


def is_character_key(key: str) -> bool:
    """Check if a key name is a single-character key."""
    return len(key) == 1


def sort_combo(keys: Iterable[str]) -> list[str]:
    """Order the keys of one combo.

    Sorting order: modifiers (alphabetically) → character keys (alphabetically)

    Examples:
        >>> sort_combo({'k', 'ctrl'})
        ['ctrl', 'k']
        >>> sort_combo(['shift', 'a', 'alt'])
        ['alt', 'shift', 'a']
    """
    modifiers = []
    characters = []

    for key in keys:
        if is_modifier_key(key):
            modifiers.append(key)
        else:
            characters.append(key)

    return sorted(modifiers) + sorted(characters)


def format_combo(keys: Iterable[str]) -> str:
    """Format one combo as a '+'-joined string.

    A combo that is already a formatted string is split and re-sorted, so
    formatting is idempotent.

    Examples:
        >>> format_combo({'k', 'ctrl'})
        'ctrl+k'
        >>> format_combo('ctrl+k')
        'ctrl+k'
    """
    if isinstance(keys, str):
        keys = parse_combo(keys)
    return COMBO_SEPARATOR.join(sort_combo(keys))


def parse_combo(combo: str) -> list[str]:
    """Split a formatted combo string back into key names.

    The '+' key itself is kept when it appears as an empty field, so
    "shift++" parses as ['shift', '+'].
    """
    if combo == COMBO_SEPARATOR:
        return [COMBO_SEPARATOR]
    parts = combo.split(COMBO_SEPARATOR)
    keys = [part for part in parts if part]
    if len(keys) != len(parts):
        keys.append(COMBO_SEPARATOR)
    return keys


def normalize_sequence(sequence: Iterable[Iterable[str]]) -> list[str]:
    """Return a normalized copy of a sequence of combos.

    The input and the combos in it are left untouched; this is the form used
    for progress reports on a sequence that is still being recorded.

    Examples:
        >>> normalize_sequence([['k', 'ctrl'], ['c']])
        ['ctrl+k', 'c']
    """
    return [format_combo(combo) for combo in sequence]


def normalize_sequence_in_place(sequence: list[Any]) -> list[str]:
    """Normalize a finished sequence, replacing each combo with its string form.

    Args:
        sequence: List of combos; mutated in place

    Returns:
        list[str]: The same list object, now holding formatted combos
    """
    for index, combo in enumerate(sequence):
        sequence[index] = format_combo(combo)
    return sequence


def format_combo_toml(combo: str) -> list[str]:
    """Format one combo string as a TOML-ready list of key names.

    Examples:
        >>> format_combo_toml('ctrl+shift+k')
        ['ctrl', 'shift', 'k']
    """
    return sort_combo(parse_combo(combo))
