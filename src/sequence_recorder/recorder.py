"""Recording state machine.

This module implements the core sequence recording logic: raw keydown/keyup
events are accumulated into combos, combos are closed on re-entry or release
boundaries, and the idle timer decides when the whole sequence is finished.

Combo boundary semantics (important):
- Re-entry: a single-character keydown while the open combo already holds a
  single-character key closes the open combo first ("a" then "b" without
  releasing "a" records ["a", "b"])
- Release: any keyup while the open combo is non-empty closes it
  ("ctrl" + "k" then releasing both records ["ctrl+k"])
- The idle timer restarts on every combo boundary, never on single keys
"""

from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from threading import RLock
from typing import Any

from common.key_normalizer import is_character_key
from common.key_normalizer import normalize_sequence
from common.key_normalizer import normalize_sequence_in_place
from common.logging_utils import get_logger

from .accumulator import KeyAccumulator
from .idle_timer import IdleTimer
from .idle_timer import TimerFactory
from .models import KEYDOWN
from .models import KEYUP
from .models import RecorderConfig
from .models import RecordingInProgressError

SequenceCallback = Callable[[list[str]], None]


@dataclass
class RecordingSession:
    """State of one active recording.

    Attributes:
        callback: Called with the normalized sequence once recording finishes
        config: Options resolved for this recording
        progress_callback: Called with a normalized copy after every new key
        sequence: Closed combos in the order they were typed
        current: Keys of the combo still being built
    """
    callback: SequenceCallback | None
    config: RecorderConfig
    progress_callback: SequenceCallback | None = None
    sequence: list[list[str]] = field(default_factory=list)
    current: KeyAccumulator = field(default_factory=KeyAccumulator)

    def close_combo(self) -> None:
        """Append the open combo to the sequence and start an empty one."""
        self.sequence.append(self.current.keys())
        self.current.clear()

    def snapshot(self) -> list[str]:
        """Normalized copy of the sequence including the open combo."""
        return normalize_sequence([*self.sequence, self.current.keys()])


class SequenceRecorder:
    """Record key sequences for one dispatcher.

    The recorder owns at most one RecordingSession at a time and keeps the
    dispatcher's `recording` flag in sync with it.

    Args:
        dispatcher: Object exposing a writable boolean `recording` attribute
        config: Construction-time recording options (defaults if None)
        timer_factory: Optional timer factory passed to IdleTimer (tests use
            a manual timer)

    Raises:
        RecordingInProgressError: If the dispatcher is already recording
    """

    def __init__(
        self,
        dispatcher: Any,
        config: RecorderConfig | None = None,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.config = config or RecorderConfig()
        self._lock = RLock()
        self._timer = IdleTimer(lock=self._lock, timer_factory=timer_factory)
        self._session: RecordingSession | None = None
        self.logger = get_logger('sequence_recorder.recorder')
        if getattr(dispatcher, 'recording', False):
            raise RecordingInProgressError('Dispatcher is already recording')  # noqa: TRY003
        self.dispatcher.recording = False

    @property
    def session(self) -> RecordingSession | None:
        return self._session

    @property
    def is_recording(self) -> bool:
        return self._session is not None

    def start(
        self,
        callback: SequenceCallback | None,
        timeout: int | None = None,
        prevent_default: bool | None = None,
        no_repeat: bool | None = None,
        progress_callback: SequenceCallback | None = None,
    ) -> RecordingSession:
        """Begin recording the next sequence.

        Options left as None fall back to the construction-time config.

        Raises:
            RecordingInProgressError: If a recording is already active
        """
        with self._lock:
            if self._session is not None:
                raise RecordingInProgressError('A sequence is already being recorded')  # noqa: TRY003

            config = self.config.merge(
                timeout=timeout,
                prevent_default=prevent_default,
                no_repeat=no_repeat,
            )
            self._session = RecordingSession(
                callback=callback,
                config=config,
                progress_callback=progress_callback,
            )
            self.dispatcher.recording = True
            self.logger.info(
                'Recording started (timeout=%sms, prevent_default=%s, no_repeat=%s)',
                config.timeout, config.prevent_default, config.no_repeat,
            )
            return self._session

    def cancel(self) -> bool:
        """Discard the active recording without delivering it.

        Returns:
            bool: True if a recording was cancelled, False if none was active
        """
        with self._lock:
            if self._session is None:
                return False
            self._reset()
            self.logger.info('Recording cancelled')
            return True

    def handle_key(self, character: str, modifiers: list[str], event: Any) -> None:
        """Handle one key event while recording.

        Args:
            character: Key name of the event (e.g., 'k', 'ctrl')
            modifiers: Modifier key names held at the time of the event
            event: Raw event with `type`, `repeat` and `prevent_default()`
        """
        with self._lock:
            session = self._session
            if session is None:
                return
            progress = self._handle_key_locked(session, character, modifiers, event)

        # progress callbacks run unlocked so they may feed keys or cancel
        if session.progress_callback is not None:
            for partial in progress:
                session.progress_callback(partial)

    def _handle_key_locked(
        self,
        session: RecordingSession,
        character: str,
        modifiers: list[str],
        event: Any,
    ) -> list[list[str]]:
        """Apply one event to the session and collect the progress snapshots."""
        progress: list[list[str]] = []
        if session.config.no_repeat and getattr(event, 'repeat', False):
            self.logger.debug('%s repeat ignored', character)
            return progress

        if session.config.prevent_default:
            event.prevent_default()

        if event.type == KEYDOWN:
            # re-entry: a second character key starts a new combo
            if is_character_key(character) and session.current.has_character_key:
                self._close_combo(session)

            for modifier in modifiers:
                self._record_key(session, modifier, progress)
            self._record_key(session, character, progress)

        elif event.type == KEYUP and session.current:
            self._close_combo(session)

        return progress

    def _record_key(self, session: RecordingSession, key: str, progress: list[list[str]]) -> None:
        if session.current.add(key) and session.progress_callback is not None:
            progress.append(session.snapshot())

    def _close_combo(self, session: RecordingSession) -> None:
        session.close_combo()
        self.logger.debug('Combo closed: %s', session.sequence[-1])
        self._timer.restart(session.config.timeout, self._finish)

    def _finish(self) -> Callable[[], None] | None:
        """Detach the finished session; runs under the lock when the idle timer fires.

        Returns:
            Callable delivering the sequence, which the timer runs after
            releasing the lock, or None when there is nothing to deliver
        """
        session = self._session
        if session is None:
            return None

        self._reset()
        sequence = normalize_sequence_in_place(session.sequence)
        self.logger.info('Recording finished: %s', sequence)

        callback = session.callback
        if callback is None:
            return None

        def deliver() -> None:
            try:
                callback(sequence)
            except Exception:
                self.logger.exception('Error in recording callback')

        return deliver

    def _reset(self) -> None:
        self._timer.cancel()
        self._session = None
        self.dispatcher.recording = False
