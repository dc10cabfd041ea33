from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

DeviceId = int
KeyRef = Tuple[DeviceId, int]

# evdev EV_KEY values
RELEASE = 0
PRESS = 1
REPEAT = 2


@dataclass(slots=True)
class ParsedEvent:
    device_id: DeviceId
    key_ref: KeyRef
    keycode: int
    value: int  # 0 release, 1 press, 2 repeat
    key_name: Optional[str]


class EmitterProtocol(Protocol):
    def emit_press(self, code: int) -> None: ...
    def emit_release(self, code: int) -> None: ...
    def emit_repeat(self, code: int) -> None: ...
