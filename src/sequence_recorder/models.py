"""Data models for sequence-recorder configuration and key events."""

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path

from common.key_event import KEYDOWN  # noqa: F401
from common.key_event import KEYUP  # noqa: F401
from common.key_event import KeyEvent  # noqa: F401

BACKENDS = ('evdev', 'pynput')


class RecordingInProgressError(RuntimeError):
    """Raised when a recording is started while another one is active."""


@dataclass
class RecorderConfig:
    """Recording options.

    Attributes:
        timeout: Idle time in milliseconds after the last combo before the
            sequence is considered finished
        prevent_default: Suppress recorded events so they do not reach the system
        no_repeat: Ignore auto-repeated keydown events while recording
    """
    timeout: int = 1000
    prevent_default: bool = False
    no_repeat: bool = False

    def __post_init__(self) -> None:
        """Validate the recorder configuration."""
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise TypeError(f'timeout must be a number, got {self.timeout!r}')  # noqa: TRY003
        if self.timeout < 0:
            raise ValueError(f'timeout must not be negative, got {self.timeout}')  # noqa: TRY003

    def merge(
        self,
        timeout: int | None = None,
        prevent_default: bool | None = None,
        no_repeat: bool | None = None,
    ) -> 'RecorderConfig':
        """Return a copy with every explicitly given option overriding this one.

        None means "not provided"; 0 and False are honoured.
        """
        return RecorderConfig(
            timeout=self.timeout if timeout is None else timeout,
            prevent_default=self.prevent_default if prevent_default is None else prevent_default,
            no_repeat=self.no_repeat if no_repeat is None else no_repeat,
        )

    @classmethod
    def from_options(cls, options: dict | None = None) -> 'RecorderConfig':
        """Build a configuration from construction-time options over the defaults.

        Args:
            options: Mapping with any of 'timeout', 'prevent_default', 'no_repeat'

        Raises:
            ValueError: If an unknown option is given
        """
        options = dict(options or {})
        unknown = set(options) - {'timeout', 'prevent_default', 'no_repeat'}
        if unknown:
            raise ValueError(f'Unknown recorder options: {", ".join(sorted(unknown))}')  # noqa: TRY003
        return cls().merge(**options)


@dataclass
class AppConfig:
    """Application configuration.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (None for console logging only)
        backend: Keyboard backend name ('evdev' or 'pynput')
        device_name: Partial keyboard device name to record from (evdev only)
        recorder: Default recording options
    """
    log_level: str = 'INFO'
    log_file: Path | None = None
    backend: str = 'evdev'
    device_name: str | None = None
    recorder: RecorderConfig = field(default_factory=RecorderConfig)

    def __post_init__(self) -> None:
        """Validate the application configuration."""
        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
            raise ValueError(f'Invalid log_level: {self.log_level}')  # noqa: TRY003

        if self.backend not in BACKENDS:
            raise ValueError(f'Invalid backend: {self.backend}')  # noqa: TRY003
