"""Backend detection and factory.

evdev is the default backend: it works on both X11 and Wayland and can
suppress recorded events. pynput is available as a fallback (X11, macOS,
Windows) without suppression.
"""

import logging
from typing import Any

from .base import BackendNotAvailableError, KeyboardBackend

logger = logging.getLogger('sequence_recorder.common.backend')

EVDEV_TROUBLESHOOTING = (
    'Troubleshooting:\n'
    '1. Install evdev library: pip install evdev\n'
    '2. Add user to input group:\n'
    '   sudo usermod -a -G input $USER\n'
    '   Then log out and back in.\n'
    '3. For uinput support (--prevent-default):\n'
    '   Create udev rule: sudo tee /etc/udev/rules.d/99-uinput.rules > /dev/null << EOF\n'
    '   KERNEL=="uinput", MODE="0660", GROUP="input"\n'
    '   EOF\n'
    '   Then: sudo udevadm control --reload-rules && sudo udevadm trigger\n'
    '4. Or use the pynput backend: --backend pynput'
)


def create_backend(
    backend_name: str | None = None,
    device_name: str | None = None,
    **kwargs: Any
) -> KeyboardBackend:
    """Create a keyboard backend.

    Args:
        backend_name: 'evdev' (default) or 'pynput'
        device_name: Partial device name to select a keyboard (evdev only)
        **kwargs: Additional arguments passed to the backend constructor
                 (e.g., device_path for evdev).

    Returns:
        KeyboardBackend: Initialized backend instance.

    Raises:
        BackendNotAvailableError: If the backend cannot be initialized.
        ValueError: If backend_name is unknown.

    Examples:
        backend = create_backend()
        backend = create_backend('evdev', device_name='A4tech')
        backend = create_backend('pynput')
    """
    name = backend_name or 'evdev'

    if name == 'pynput':
        from .pynput_backend import PynputBackend

        if device_name:
            logger.warning('device_name="%s" is ignored by the pynput backend', device_name)
        backend: KeyboardBackend = PynputBackend(**kwargs)
        logger.info('Created backend: %s', backend.get_backend_name())
        return backend

    if name != 'evdev':
        raise ValueError(f'Unknown keyboard backend: {name}')  # noqa: TRY003

    try:
        from .evdev_backend import EvdevBackend

        if device_name:
            kwargs['device_name'] = device_name
        backend = EvdevBackend(**kwargs)
    except ImportError as e:
        raise BackendNotAvailableError(
            f'evdev library is not installed: {e}\n\n{EVDEV_TROUBLESHOOTING}'
        ) from e
    except BackendNotAvailableError as e:
        raise BackendNotAvailableError(
            f'Evdev backend is not available: {e}\n\n{EVDEV_TROUBLESHOOTING}'
        ) from e

    logger.info('Created backend: %s', backend.get_backend_name())
    return backend
