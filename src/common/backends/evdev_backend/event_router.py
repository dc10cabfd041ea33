from __future__ import annotations

import queue
from typing import Any, Callable

from .types import ParsedEvent


class EventRouter:
    """Pulls (device, event) pairs off the reader queue and processes them in order."""

    def __init__(
        self,
        logger: Any,
        parse_event: Callable[[Any, Any], ParsedEvent | None],
        handle_value: Callable[[ParsedEvent], None],
    ) -> None:
        self.logger = logger
        self._parse_event = parse_event
        self._handle_value = handle_value

    def run(self, queue_get: Callable[..., Any], stop_event: Any) -> None:
        event_count = 0
        self.logger.info('Starting main event processing loop...')
        while not stop_event.is_set():
            try:
                device, event = queue_get(timeout=0.1)
            except queue.Empty:
                continue
            event_count += 1
            if event_count == 1:
                self.logger.info('First event received - event loop is working')
            try:
                parsed = self._parse_event(device, event)
                if parsed is None:
                    continue
                self._handle_value(parsed)
            except Exception:
                self.logger.exception('Error processing event')
