"""Output formatting utilities for the sequence recorder CLI.

This module formats recorded sequences for console output, including a TOML
fragment that can be pasted into a key-binding configuration.
"""

from common.key_normalizer import format_combo_toml
from common.version import __version__

from .models import RecorderConfig


def format_toml_list(items: list[str]) -> str:
    """Format a list of strings as an inline TOML array.

    Examples:
        >>> format_toml_list(['ctrl+k', 'c'])
        '["ctrl+k", "c"]'
    """
    return '[' + ', '.join(f'"{_escape_toml(item)}"' for item in items) + ']'


def _escape_toml(value: str) -> str:
    """Escape a string for a TOML basic string; control characters become \\uXXXX."""
    chars = []
    for char in value:
        if char in ('\\', '"'):
            chars.append('\\' + char)
        elif char < ' ' or char == '\x7f':
            chars.append(f'\\u{ord(char):04x}')
        else:
            chars.append(char)
    return ''.join(chars)


def format_header(config: RecorderConfig, backend_name: str, suppressing: bool = False) -> str:
    """Format the application header.

    Args:
        config: Recording options in effect
        backend_name: Name of the keyboard backend
        suppressing: Whether recorded keys are kept from the system
    """
    options = []
    if config.no_repeat:
        options.append('auto-repeat ignored')
    if suppressing:
        options.append('keys suppressed while recording')
    options_line = f'Options: {", ".join(options)}\n' if options else ''

    return f"""🎹 Sequence Recorder v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Backend: {backend_name}
Idle timeout: {config.timeout}ms
{options_line}Press Ctrl+C to exit

Type a key sequence...
"""


def format_sequence_recorded(sequence: list[str]) -> str:
    """Format a completed sequence with a TOML config fragment.

    Args:
        sequence: Normalized sequence, e.g. ['ctrl+k', 'c']
    """
    if not sequence:
        return '\n✗ Nothing recorded\n\nType a key sequence...\n'

    combos = '\n'.join(
        f'    {index}. {combo}  {format_combo_toml(combo)}'
        for index, combo in enumerate(sequence, 1)
    )
    return f"""
✓ Sequence recorded: {' '.join(sequence)}
{combos}

  📋 TOML config fragment:
  ────────────────────────────────────────────
  [[bindings]]
  sequence = {format_toml_list(sequence)}
  ────────────────────────────────────────────

Type a key sequence...
"""


def format_progress(partial: list[str]) -> str:
    """Format a progress line for a sequence still being recorded."""
    return f'\r… {" ".join(partial)}\033[K'
