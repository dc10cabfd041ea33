from __future__ import annotations

from contextlib import suppress
from typing import Any, Iterable

from evdev import ecodes

from .types import PRESS, RELEASE, REPEAT


class UInputWriter:
    """Thin wrapper around evdev.UInput to re-emit key events with syn()."""

    def __init__(self, ui: Any, logger: Any) -> None:
        self.ui = ui
        self.logger = logger

    @staticmethod
    def create_from_devices(devices: Iterable[Any], logger: Any) -> 'UInputWriter':
        from evdev import UInput
        all_keys: set[int] = set()
        for device in devices:
            caps = device.capabilities()
            if ecodes.EV_KEY in caps:
                all_keys.update(caps[ecodes.EV_KEY])
        ui = UInput({ecodes.EV_KEY: sorted(all_keys)}, name='sequence-recorder-uinput')
        logger.info('Created uinput virtual device for event re-emission')
        return UInputWriter(ui, logger)

    def emit(self, code: int, value: int) -> None:
        self.ui.write(ecodes.EV_KEY, code, value)
        self.ui.syn()

    def emit_press(self, code: int) -> None:
        self.emit(code, PRESS)

    def emit_release(self, code: int) -> None:
        self.emit(code, RELEASE)

    def emit_repeat(self, code: int) -> None:
        self.emit(code, REPEAT)

    def close(self) -> None:
        with suppress(OSError):
            self.ui.close()
