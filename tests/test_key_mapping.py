import pytest

from common.backends.key_mapping import evdev_to_key_name


@pytest.mark.parametrize(
    ('keycode', 'name'),
    [
        ('KEY_LEFTCTRL', 'ctrl_l'),
        ('KEY_RIGHTMETA', 'super_r'),
        ('KEY_K', 'k'),
        ('KEY_7', '7'),
        ('KEY_F24', 'f24'),
        ('KEY_KP5', 'kp5'),
        ('KEY_SLASH', '/'),
        (['KEY_MUTE', 'KEY_MIN_INTERESTING'], 'media_volume_mute'),
    ],
)
def test_evdev_to_key_name(keycode, name):
    assert evdev_to_key_name(keycode) == name


def test_unknown_keycode():
    with pytest.raises(KeyError):
        evdev_to_key_name('KEY_BRIGHTNESSUP')
