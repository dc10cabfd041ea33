"""Restartable single-shot idle timer.

The timer runs on a threading.Timer thread. Every restart bumps a generation
number; a fire whose generation is no longer current is dropped, so only the
most recently scheduled fire can ever reach its callback even if cancel()
loses the race against an already running timer thread.
"""

import threading
from collections.abc import Callable
from typing import Any

from common.logging_utils import get_logger

TimerFactory = Callable[[float, Callable[[], None]], Any]
FireHandler = Callable[[], Callable[[], None] | None]


class IdleTimer:
    """Single-shot timer measuring idle time between completed combos.

    Args:
        lock: Lock shared with the owner of the callback. The fire handler
            holds it while checking the generation and running on_fire;
            a callable returned by on_fire runs after the lock is released.
        timer_factory: Callable creating a started-on-demand timer object with
            start() and cancel(), called as factory(seconds, function).
            Defaults to threading.Timer.
    """

    def __init__(
        self,
        lock: Any = None,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self._lock = lock if lock is not None else threading.RLock()
        self._timer_factory = timer_factory or threading.Timer
        self._timer: Any = None
        self._generation = 0
        self.logger = get_logger('sequence_recorder.idle_timer')

    @property
    def pending(self) -> bool:
        """Whether a fire is currently scheduled."""
        return self._timer is not None

    def restart(self, duration_ms: float, on_fire: FireHandler) -> None:
        """Cancel any pending fire and schedule on_fire after duration_ms."""
        with self._lock:
            self._cancel_locked()
            generation = self._generation

            def fire() -> None:
                self._fire(generation, on_fire)

            timer = self._timer_factory(duration_ms / 1000.0, fire)
            if hasattr(timer, 'daemon'):
                timer.daemon = True
            self._timer = timer
            timer.start()
            self.logger.debug('Idle timer restarted: %sms', duration_ms)

    def cancel(self) -> None:
        """Cancel a pending fire without rescheduling."""
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int, on_fire: FireHandler) -> None:
        with self._lock:
            if generation != self._generation:
                self.logger.debug('Dropping stale idle timer fire')
                return
            self._timer = None
            self._generation += 1
            deliver = on_fire()

        if deliver is not None:
            deliver()
