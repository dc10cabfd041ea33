"""Dispatcher interception shim.

RecordingShim is the single entry point for key events. It keeps a reference
to the dispatcher's own handler and routes events either to the recorder (while
the dispatcher's `recording` flag is set and a session is active) or to that
handler, unchanged. Wrapping a dispatcher that is already recording is refused.
"""

from typing import Any

from .idle_timer import TimerFactory
from .models import RecorderConfig
from .recorder import RecordingSession
from .recorder import SequenceCallback
from .recorder import SequenceRecorder


class RecordingShim:
    """Route key events between a dispatcher and a SequenceRecorder.

    Args:
        dispatcher: Object with a `recording` flag and a `handle_key` method
        options: Construction-time recording options
            ({'timeout': ms, 'prevent_default': bool, 'no_repeat': bool}) or a
            RecorderConfig
        timer_factory: Optional timer factory for the idle timer

    Raises:
        RecordingInProgressError: If the dispatcher is already recording

    Example:
        >>> dispatcher = KeyDispatcher()
        >>> shim = RecordingShim(dispatcher, {'timeout': 500})
        >>> shim.record(print)
        >>> dispatcher.recording
        True
    """

    def __init__(
        self,
        dispatcher: Any,
        options: dict | RecorderConfig | None = None,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        if not isinstance(options, RecorderConfig):
            options = RecorderConfig.from_options(options)
        self.dispatcher = dispatcher
        self._original_handle_key = dispatcher.handle_key
        self.recorder = SequenceRecorder(dispatcher, options, timer_factory=timer_factory)

    @property
    def recording(self) -> bool:
        return bool(self.dispatcher.recording)

    def handle_key(self, character: str, modifiers: list[str], event: Any) -> None:
        """Entry point for key events from the event source."""
        if not (self.dispatcher.recording and self.recorder.is_recording):
            self._original_handle_key(character, modifiers, event)
            return
        self.recorder.handle_key(character, modifiers, event)

    def record(
        self,
        callback: SequenceCallback | None,
        timeout: int | None = None,
        prevent_default: bool | None = None,
        no_repeat: bool | None = None,
        progress_callback: SequenceCallback | None = None,
    ) -> None:
        """Record the next sequence and pass it to callback once it is completed.

        Args:
            callback: Receives the normalized sequence, e.g. ['ctrl+k', 'c']
            timeout: Idle timeout in milliseconds (None keeps the configured value)
            prevent_default: Suppress recorded events (None keeps the configured value)
            no_repeat: Ignore auto-repeat events (None keeps the configured value)
            progress_callback: Receives the partial sequence after every new key

        Raises:
            RecordingInProgressError: If a recording is already active
        """
        self.recorder.start(
            callback,
            timeout=timeout,
            prevent_default=prevent_default,
            no_repeat=no_repeat,
            progress_callback=progress_callback,
        )

    def cancel(self) -> bool:
        """Abort the active recording without calling its callback."""
        return self.recorder.cancel()

    @property
    def session(self) -> RecordingSession | None:
        return self.recorder.session
