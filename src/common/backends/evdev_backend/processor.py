from __future__ import annotations

from typing import Any, Callable

from common.key_event import KEYDOWN, KEYUP, KeyEvent

from .key_state import KeyState
from .types import PRESS, RELEASE, REPEAT, EmitterProtocol, ParsedEvent


class EventProcessor:
    """Turns parsed evdev events into KeyEvents and re-emits what was not prevented.

    Without a uinput writer (devices not grabbed) events reach the system
    directly and prevent_default() has no effect.
    """

    def __init__(
        self,
        logger: Any,
        key_state: KeyState,
        uinput_writer: EmitterProtocol | None,
    ) -> None:
        self.logger = logger
        self.key_state = key_state
        self.uinput_writer = uinput_writer

    def _safe_call(self, label: str, fn: Callable[[KeyEvent], None], event: KeyEvent) -> None:
        """Call a callback, logging any errors."""
        try:
            fn(event)
        except Exception:
            self.logger.exception('Error in %s callback', label)

    def handle_unknown(self, evt: ParsedEvent) -> bool:
        """Pass keys without a canonical name straight through. Returns True if handled."""
        if evt.key_name is not None:
            return False
        if self.uinput_writer is None:
            return True
        if evt.value == PRESS:
            self.key_state.register_emitted(evt.key_ref)
            self.uinput_writer.emit_press(evt.keycode)
        elif evt.value == RELEASE:
            if self.key_state.release(evt.key_ref):
                self.uinput_writer.emit_release(evt.keycode)
        elif evt.value == REPEAT:
            self.uinput_writer.emit_repeat(evt.keycode)
        return True

    def process(
        self,
        evt: ParsedEvent,
        on_press: Callable[[KeyEvent], None],
        on_release: Callable[[KeyEvent], None],
    ) -> None:
        """Process a parsed keyboard event.

        Press and repeat events go to on_press (repeat=True for auto-repeat),
        releases go to on_release. The event is re-emitted unless a callback
        called prevent_default().
        """
        if self.handle_unknown(evt):
            return

        if evt.value in (PRESS, REPEAT):
            event = KeyEvent(KEYDOWN, key=evt.key_name, repeat=evt.value == REPEAT)
            self._safe_call('on_press', on_press, event)
            if self.uinput_writer is None:
                return
            if event.default_prevented:
                self.logger.debug('Suppressing %s: keycode=%s, key=%s',
                                  'repeat' if event.repeat else 'press', evt.keycode, evt.key_name)
                self.key_state.register_swallowed(evt.key_ref)
                return
            if evt.value == REPEAT:
                if self.key_state.is_swallowed(evt.key_ref):
                    # the system never saw the press; emit it now
                    self.key_state.register_emitted(evt.key_ref)
                    self.uinput_writer.emit_press(evt.keycode)
                else:
                    self.uinput_writer.emit_repeat(evt.keycode)
                return
            self.key_state.register_emitted(evt.key_ref)
            self.uinput_writer.emit_press(evt.keycode)

        elif evt.value == RELEASE:
            event = KeyEvent(KEYUP, key=evt.key_name)
            self._safe_call('on_release', on_release, event)
            if self.uinput_writer is None:
                return
            if self.key_state.release(evt.key_ref):
                self.uinput_writer.emit_release(evt.keycode)
            else:
                self.logger.debug('Suppressing release: keycode=%s, key=%s', evt.keycode, evt.key_name)
