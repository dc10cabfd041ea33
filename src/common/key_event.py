"""Key event passed from keyboard backends to the dispatcher."""

from dataclasses import dataclass
from dataclasses import field

KEYDOWN = 'keydown'
KEYUP = 'keyup'


@dataclass
class KeyEvent:
    """A raw keyboard event as delivered by a backend.

    Attributes:
        type: Either 'keydown' or 'keyup'
        key: Canonical key name reported by the backend (e.g., 'ctrl_l', 'a')
        repeat: True if the keydown was generated by keyboard auto-repeat
    """
    type: str
    key: str = ''
    repeat: bool = False
    _default_prevented: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the event type."""
        if self.type not in (KEYDOWN, KEYUP):
            raise ValueError(f'Invalid key event type: {self.type!r}')  # noqa: TRY003

    def prevent_default(self) -> None:
        """Ask the backend not to pass this event on to the system."""
        self._default_prevented = True

    @property
    def default_prevented(self) -> bool:
        return self._default_prevented
