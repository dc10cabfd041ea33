import pytest

from sequence_recorder.dispatcher import KeyDispatcher
from sequence_recorder.models import KEYDOWN, KEYUP, KeyEvent
from sequence_recorder.shim import RecordingShim


class ManualTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, clock, interval, function):
        self.clock = clock
        self.interval = interval
        self.function = function
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True
        self.clock.timers.append(self)

    def cancel(self):
        self.cancelled = True

    @property
    def live(self):
        return self.started and not self.cancelled


class ManualClock:
    def __init__(self):
        self.timers = []

    def factory(self, interval, function):
        return ManualTimer(self, interval, function)

    @property
    def live(self):
        return [timer for timer in self.timers if timer.live]

    def fire(self):
        """Fire the most recently scheduled live timer."""
        live = self.live
        assert live, 'no timer pending'
        timer = live[-1]
        timer.cancelled = True
        timer.function()
        return timer


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def forwarded():
    return []


@pytest.fixture
def dispatcher(forwarded):
    return KeyDispatcher(on_key=lambda character, modifiers, event: forwarded.append((character, modifiers, event)))


@pytest.fixture
def shim(dispatcher, clock):
    return RecordingShim(dispatcher, timer_factory=clock.factory)


def keydown(shim, character, modifiers=(), repeat=False):
    event = KeyEvent(KEYDOWN, key=character, repeat=repeat)
    shim.handle_key(character, list(modifiers), event)
    return event


def keyup(shim, character, modifiers=()):
    event = KeyEvent(KEYUP, key=character)
    shim.handle_key(character, list(modifiers), event)
    return event


def tap(shim, character, modifiers=()):
    keydown(shim, character, modifiers)
    keyup(shim, character, modifiers)
