from __future__ import annotations

import threading
from contextlib import suppress
from typing import Any, Callable, Iterable

import evdev
from evdev import ecodes


class DeviceManager:
    """Discovers keyboard devices and runs one reader thread per device."""

    def __init__(self, logger: Any) -> None:
        self.logger = logger

    @staticmethod
    def device_has_keyboard_caps(device: Any) -> bool:
        """Return True if the evdev device exposes keyboard capabilities."""
        caps = device.capabilities()
        if ecodes.EV_KEY not in caps:
            return False
        keys = caps[ecodes.EV_KEY]
        return (
            ecodes.KEY_LEFTCTRL in keys
            or ecodes.KEY_RIGHTCTRL in keys
            or ecodes.KEY_LEFTALT in keys
            or ecodes.KEY_A in keys
        )

    @staticmethod
    def is_virtual_uinput(device: Any, path: str) -> bool:
        name_l = device.name.lower()
        path_l = str(path).lower()
        return 'uinput' in name_l or 'uinput' in path_l

    def _keyboards(self) -> list[Any]:
        devices = []
        for path in evdev.list_devices():
            try:
                dev = evdev.InputDevice(path)
            except OSError:
                continue
            if self.device_has_keyboard_caps(dev):
                devices.append(dev)
            else:
                dev.close()
        return devices

    def discover_auto(self) -> list[Any]:
        devices = self._keyboards()
        # Prefer physical keyboards; never read back our own uinput device
        physical = [d for d in devices if not self.is_virtual_uinput(d, d.path)]
        return physical or devices

    def discover_by_name(self, name: str) -> list[Any]:
        """Return keyboards whose name contains `name` (case-insensitive)."""
        needle = name.lower()
        return [d for d in self._keyboards() if needle in d.name.lower()]

    def grab_all(self, devices: Iterable[Any]) -> list[Any]:
        grabbed = []
        for dev in devices:
            try:
                dev.grab()
                grabbed.append(dev)
                self.logger.debug('Device grabbed: %s', dev.name)
            except OSError as e:
                self.logger.warning('Failed to grab device %s: %s. Events may reach the system unsuppressed.', dev.name, e)
        return grabbed

    def ungrab_all(self, devices: Iterable[Any]) -> None:
        for dev in devices:
            with suppress(OSError):
                dev.ungrab()

    def start_reader_threads(
        self,
        devices: Iterable[Any],
        queue_put: Callable[[tuple[Any, Any]], None],
        stop_event: threading.Event,
    ) -> list[threading.Thread]:
        """Start one daemon reader thread per device feeding queue_put((device, event))."""
        threads = []
        for dev in devices:
            t = threading.Thread(
                target=self._reader_loop,
                args=(dev, queue_put, stop_event),
                daemon=True,
                name=f'evdev-read-{dev.name}'
            )
            t.start()
            threads.append(t)
        return threads

    def _reader_loop(self, device: Any, queue_put: Callable[[tuple[Any, Any]], None], stop_event: threading.Event) -> None:
        try:
            for event in device.read_loop():
                if stop_event.is_set():
                    break
                queue_put((device, event))
        except OSError as e:
            if not stop_event.is_set():
                self.logger.error('Error reading from device %s: %s', device.name, e)
