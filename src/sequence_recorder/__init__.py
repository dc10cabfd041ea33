"""Sequence Recorder - record keyboard key sequences.

Keys pressed together are grouped into combos ("ctrl+k"), consecutive combos
form a sequence, and the sequence is delivered to a callback once the idle
timeout passes without further input.
"""

from common.version import __version__

from .dispatcher import KeyDispatcher
from .models import KeyEvent
from .models import RecorderConfig
from .models import RecordingInProgressError
from .recorder import RecordingSession
from .recorder import SequenceRecorder
from .shim import RecordingShim

__all__ = [
    '__version__',
    'KeyDispatcher',
    'KeyEvent',
    'RecorderConfig',
    'RecordingInProgressError',
    'RecordingSession',
    'RecordingShim',
    'SequenceRecorder',
]
