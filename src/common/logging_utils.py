"""Logging utilities for consistent logger creation across the project.

Loggers are named after module paths below the 'sequence_recorder' root
(e.g., 'sequence_recorder.recorder'), so configuring the root logger once in
the CLI covers the recorder, the timer and the keyboard backends.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

ROOT_LOGGER_NAME = 'sequence_recorder'


def get_logger(name: str | None = None) -> logging.Logger:
    """Create or retrieve a logger with consistent naming.

    Args:
        name: Logger name such as 'sequence_recorder.recorder'. Names outside
            the project root (e.g., 'common.backend.evdev') are re-rooted
            under 'sequence_recorder'. None returns the root project logger.

    Returns:
        logging.Logger: Logger instance

    Examples:
        >>> get_logger('sequence_recorder.recorder').name
        'sequence_recorder.recorder'
        >>> get_logger('common.backend.evdev').name
        'sequence_recorder.common.backend.evdev'
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f'{ROOT_LOGGER_NAME}.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'
    return logging.getLogger(name)


class ISOFormatter(logging.Formatter):
    """Log formatter with ISO timestamp including milliseconds.

    Formats log messages as:
        <ISO-datetime-with-ms> <log-level> [<module>:<lineno>]: <message>
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(timespec='milliseconds')
        message = f'{timestamp} {record.levelname} [{record.module}:{record.lineno}]: {record.getMessage()}'
        if record.exc_info:
            message = f'{message}\n{self.formatException(record.exc_info)}'
        return message


def setup_logging_handler(
    logger: logging.Logger,
    log_level: str = 'INFO',
    foreground: bool = True,
    log_file: Path | None = None,
) -> None:
    """Set up the logging handler for console or file output.

    Args:
        logger: Logger instance to configure
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        foreground: If True, log to stderr. If False, log to log_file (if provided)
        log_file: Path to log file (used only when foreground=False)
    """
    level = getattr(logging, log_level.upper())
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers.clear()

    if foreground:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
    elif log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.NullHandler()

    handler.setLevel(level)
    handler.setFormatter(ISOFormatter())
    logger.addHandler(handler)
