"""Mapping from evdev key codes to canonical key names (str).

Letters and digits map to their single character ('KEY_A' → 'a'), so they
count as character keys when recording; everything else maps to a longer
name ('KEY_LEFTCTRL' → 'ctrl_l', 'KEY_F5' → 'f5').
"""

EVDEV_TO_NAME: dict[str, str] = {
    # Modifiers - Left/Right
    'KEY_LEFTCTRL': 'ctrl_l', 'KEY_RIGHTCTRL': 'ctrl_r',
    'KEY_LEFTSHIFT': 'shift_l', 'KEY_RIGHTSHIFT': 'shift_r',
    'KEY_LEFTALT': 'alt_l', 'KEY_RIGHTALT': 'alt_r',
    'KEY_LEFTMETA': 'super_l', 'KEY_RIGHTMETA': 'super_r',

    # Special keys
    'KEY_ESC': 'esc', 'KEY_ENTER': 'enter', 'KEY_TAB': 'tab',
    'KEY_BACKSPACE': 'backspace', 'KEY_DELETE': 'delete', 'KEY_INSERT': 'insert',
    'KEY_SPACE': 'space',

    # Navigation
    'KEY_HOME': 'home', 'KEY_END': 'end', 'KEY_PAGEUP': 'page_up', 'KEY_PAGEDOWN': 'page_down',
    'KEY_UP': 'up', 'KEY_DOWN': 'down', 'KEY_LEFT': 'left', 'KEY_RIGHT': 'right',

    # Lock keys
    'KEY_CAPSLOCK': 'caps_lock', 'KEY_NUMLOCK': 'num_lock', 'KEY_SCROLLLOCK': 'scroll_lock',

    # Media keys
    'KEY_MUTE': 'media_volume_mute', 'KEY_VOLUMEDOWN': 'media_volume_down', 'KEY_VOLUMEUP': 'media_volume_up',
    'KEY_PLAYPAUSE': 'media_play_pause', 'KEY_PREVIOUSSONG': 'media_previous', 'KEY_NEXTSONG': 'media_next',

    'KEY_SYSRQ': 'print_screen', 'KEY_PAUSE': 'pause', 'KEY_MENU': 'menu',

    # Symbols
    'KEY_SLASH': '/', 'KEY_DOT': '.', 'KEY_COMMA': ',', 'KEY_MINUS': '-', 'KEY_EQUAL': '=',
    'KEY_LEFTBRACE': '[', 'KEY_RIGHTBRACE': ']', 'KEY_SEMICOLON': ';', 'KEY_APOSTROPHE': "'",
    'KEY_BACKSLASH': '\\', 'KEY_GRAVE': '`',

    # Numpad operators (digits are added below)
    'KEY_KPENTER': 'kpenter', 'KEY_KPPLUS': 'kpplus', 'KEY_KPMINUS': 'kpminus',
    'KEY_KPASTERISK': 'kpasterisk', 'KEY_KPSLASH': 'kpslash', 'KEY_KPDOT': 'kpdot',
}
EVDEV_TO_NAME.update({f'KEY_F{n}': f'f{n}' for n in range(1, 25)})
EVDEV_TO_NAME.update({f'KEY_KP{n}': f'kp{n}' for n in range(10)})


def evdev_to_key_name(keycode: str | list[str]) -> str:
    """Convert an evdev keycode to a canonical key name.

    evdev reports aliased codes as a list ('KEY_MUTE', 'KEY_MIN_INTERESTING');
    the first entry is used.

    Raises:
        KeyError: If the keycode has no canonical name

    Examples:
        >>> evdev_to_key_name('KEY_LEFTCTRL')
        'ctrl_l'
        >>> evdev_to_key_name('KEY_K')
        'k'
        >>> evdev_to_key_name('KEY_7')
        '7'
    """
    if isinstance(keycode, list):
        if not keycode:
            raise KeyError('Empty keycode list')
        keycode = keycode[0]
    if keycode in EVDEV_TO_NAME:
        return EVDEV_TO_NAME[keycode]
    if keycode.startswith('KEY_') and len(keycode) == 5:
        ch = keycode[4].lower()
        if ch.isalnum():
            return ch
    raise KeyError(f'Unknown evdev keycode: {keycode}')
