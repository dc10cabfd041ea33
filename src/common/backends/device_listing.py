"""Public API for listing keyboard devices.

The CLI uses these functions instead of accessing evdev directly.
"""

from __future__ import annotations

from typing import Any

from .base import BackendNotAvailableError


def list_keyboard_devices() -> list[dict[str, Any]]:
    """List all available keyboard devices in the system.

    Physical keyboards are listed first, followed by virtual keyboards (uinput).

    Returns:
        list[dict[str, Any]]: Device info dictionaries with
            'name' (str), 'path' (str) and 'is_virtual' (bool)

    Raises:
        BackendNotAvailableError: If evdev is not installed
        PermissionError: If access to /dev/input/ is denied
    """
    try:
        import evdev
    except ImportError as e:
        raise BackendNotAvailableError(
            'evdev library is not installed. Install it with: pip install evdev'
        ) from e

    from .evdev_backend.device_manager import DeviceManager

    try:
        device_paths = evdev.list_devices()
    except PermissionError as e:
        raise PermissionError(
            'Permission denied accessing /dev/input/. '
            'Add user to "input" group:\n'
            '  sudo usermod -a -G input $USER\n'
            'Then log out and back in for changes to take effect.'
        ) from e

    physical_keyboards = []
    virtual_keyboards = []

    for path in device_paths:
        try:
            device = evdev.InputDevice(path)
        except OSError:
            continue
        try:
            if not DeviceManager.device_has_keyboard_caps(device):
                continue
            is_virtual = DeviceManager.is_virtual_uinput(device, path)
            device_info = {
                'name': device.name,
                'path': device.path,
                'is_virtual': is_virtual,
            }
        finally:
            device.close()

        if is_virtual:
            virtual_keyboards.append(device_info)
        else:
            physical_keyboards.append(device_info)

    return physical_keyboards + virtual_keyboards
