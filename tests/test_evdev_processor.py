import logging

import pytest

pytest.importorskip('evdev')

from common.backends.evdev_backend.key_state import KeyState  # noqa: E402
from common.backends.evdev_backend.processor import EventProcessor  # noqa: E402
from common.backends.evdev_backend.types import PRESS, RELEASE, REPEAT, ParsedEvent  # noqa: E402

KEY_A = 30


class RecordingWriter:
    def __init__(self):
        self.emitted = []

    def emit_press(self, code):
        self.emitted.append(('press', code))

    def emit_release(self, code):
        self.emitted.append(('release', code))

    def emit_repeat(self, code):
        self.emitted.append(('repeat', code))


def parsed(value, name='a', code=KEY_A):
    return ParsedEvent(device_id=3, key_ref=(3, code), keycode=code, value=value, key_name=name)


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def processor(writer):
    return EventProcessor(logging.getLogger('test'), KeyState(), writer)


def test_events_are_reemitted(processor, writer):
    seen = []
    for value in (PRESS, REPEAT, RELEASE):
        processor.process(parsed(value), seen.append, seen.append)
    assert [(e.type, e.key, e.repeat) for e in seen] == [
        ('keydown', 'a', False),
        ('keydown', 'a', True),
        ('keyup', 'a', False),
    ]
    assert writer.emitted == [('press', KEY_A), ('repeat', KEY_A), ('release', KEY_A)]


def test_prevented_press_swallows_release(processor, writer):
    def prevent(event):
        event.prevent_default()

    processor.process(parsed(PRESS), prevent, prevent)
    processor.process(parsed(RELEASE), prevent, prevent)
    assert writer.emitted == []


def test_release_follows_emitted_press(processor, writer):
    def prevent(event):
        event.prevent_default()

    processor.process(parsed(PRESS), lambda event: None, prevent)
    processor.process(parsed(RELEASE), prevent, prevent)
    assert writer.emitted == [('press', KEY_A), ('release', KEY_A)]


def test_repeat_after_swallowed_press_emits_press(processor, writer):
    def prevent(event):
        event.prevent_default()

    processor.process(parsed(PRESS), prevent, prevent)
    processor.process(parsed(REPEAT), lambda event: None, prevent)
    processor.process(parsed(RELEASE), lambda event: None, lambda event: None)
    assert writer.emitted == [('press', KEY_A), ('release', KEY_A)]


def test_unknown_keys_pass_through(processor, writer):
    seen = []
    processor.process(parsed(PRESS, name=None, code=999), seen.append, seen.append)
    processor.process(parsed(RELEASE, name=None, code=999), seen.append, seen.append)
    assert seen == []
    assert writer.emitted == [('press', 999), ('release', 999)]


def test_callback_errors_are_logged(processor, writer, caplog):
    def broken(event):
        raise RuntimeError('boom')

    processor.process(parsed(PRESS), broken, broken)
    assert writer.emitted == [('press', KEY_A)]
    assert 'Error in on_press callback' in caplog.text


def test_without_writer_only_callbacks_run():
    seen = []
    processor = EventProcessor(logging.getLogger('test'), KeyState(), None)
    processor.process(parsed(PRESS), seen.append, seen.append)
    processor.process(parsed(RELEASE), seen.append, seen.append)
    assert [e.type for e in seen] == ['keydown', 'keyup']
