"""Evdev backend package.

Reads keyboards through /dev/input. When grabbing is enabled the devices are
grabbed exclusively and every event the callbacks did not prevent is
re-emitted through a uinput device, which is what makes
KeyEvent.prevent_default() effective.
"""

from __future__ import annotations

import queue
import threading
from contextlib import suppress
from typing import Any, Callable

import evdev

from common.key_event import KeyEvent
from common.logging_utils import get_logger

from ..base import BackendNotAvailableError
from .device_manager import DeviceManager
from .event_router import EventRouter
from .key_state import KeyState
from .parser import parse_event
from .processor import EventProcessor
from .uinput_writer import UInputWriter


class EvdevBackend:
    """Keyboard backend using evdev (Wayland/X11 compatible).

    Args:
        device_path: Read exactly this device (e.g., '/dev/input/event3')
        device_name: Read keyboards whose name contains this string
        grab: Grab devices and re-emit events so they can be suppressed
    """

    def __init__(
        self,
        device_path: str | None = None,
        device_name: str | None = None,
        grab: bool = False,
    ) -> None:
        self.logger = get_logger('common.backend.evdev')
        self.device_path = device_path
        self.device_name = device_name
        self.grab = grab
        self.devices: list[Any] = []
        self.uinput_device: UInputWriter | None = None
        self._stop_event = threading.Event()
        self._device_threads: list[threading.Thread] = []
        self._event_queue: queue.Queue[tuple[Any, Any]] = queue.Queue(maxsize=1000)
        self.key_state = KeyState()
        self.logger.debug('EvdevBackend initialized (grab=%s)', grab)

    def _open_devices(self, dm: DeviceManager) -> list[Any]:
        if self.device_name:
            devices = dm.discover_by_name(self.device_name)
            if not devices:
                raise BackendNotAvailableError(
                    f'No keyboard device found matching name "{self.device_name}"'
                )
            return devices
        if self.device_path:
            try:
                return [evdev.InputDevice(self.device_path)]
            except OSError as e:
                raise BackendNotAvailableError(
                    f'Cannot access device {self.device_path}: {e}'
                ) from e
        devices = dm.discover_auto()
        if not devices:
            raise BackendNotAvailableError('No keyboard devices found')
        return devices

    def _cleanup_devices(self) -> None:
        self._stop_event.set()
        for thread in self._device_threads:
            if thread.is_alive():
                thread.join(timeout=1.0)
        self._device_threads.clear()
        for device in self.devices:
            if self.grab:
                with suppress(OSError):
                    device.ungrab()
            with suppress(OSError):
                device.close()
        self.devices.clear()
        if self.uinput_device:
            self.uinput_device.close()
        self.uinput_device = None
        self.key_state.clear()

    # -------------------- Public API --------------------
    def start(self, on_press: Callable[[KeyEvent], None], on_release: Callable[[KeyEvent], None]) -> None:
        dm = DeviceManager(self.logger)
        self.devices = self._open_devices(dm)
        for device in self.devices:
            self.logger.info('Using keyboard device: %s (%s)', device.name, device.path)

        self._stop_event.clear()

        if self.grab:
            if not dm.grab_all(self.devices):
                raise BackendNotAvailableError('Failed to grab any keyboard devices. All devices may be busy.')
            try:
                self.uinput_device = UInputWriter.create_from_devices(self.devices, self.logger)
            except OSError as e:
                dm.ungrab_all(self.devices)
                raise BackendNotAvailableError(
                    f'Failed to create uinput device: {e}. '
                    'It is required to pass grabbed events back to the system.'
                ) from e

        try:
            self.logger.info('Starting event read threads for %d device(s)...', len(self.devices))
            self._device_threads = dm.start_reader_threads(self.devices, self._event_queue.put, self._stop_event)
            processor = EventProcessor(
                logger=self.logger,
                key_state=self.key_state,
                uinput_writer=self.uinput_device,
            )
            router = EventRouter(
                logger=self.logger,
                parse_event=parse_event,
                handle_value=lambda evt: processor.process(evt, on_press, on_release),
            )
            router.run(self._event_queue.get, self._stop_event)
        finally:
            self._cleanup_devices()

    def stop(self) -> None:
        self.logger.info('Stopping evdev keyboard listener')
        self._stop_event.set()

    def get_backend_name(self) -> str:
        return 'evdev (Wayland/X11)'

    def supports_suppression(self) -> bool:
        return self.grab


__all__ = ['EvdevBackend']
