from sequence_recorder.keystream import ModifierTracking, fold_key_name
from sequence_recorder.models import KEYDOWN, KEYUP, KeyEvent


def collect():
    calls = []
    tracking = ModifierTracking(lambda character, modifiers, event: calls.append((character, modifiers, event.type)))
    return tracking, calls


def test_fold_key_name():
    assert fold_key_name('ctrl_l') == 'ctrl'
    assert fold_key_name('super_r') == 'meta'
    assert fold_key_name('alt_gr') == 'alt'
    assert fold_key_name('K') == 'k'
    assert fold_key_name('enter') == 'enter'


def test_modifiers_annotate_events():
    tracking, calls = collect()
    tracking.on_press(KeyEvent(KEYDOWN, key='ctrl_l'))
    tracking.on_press(KeyEvent(KEYDOWN, key='k'))
    tracking.on_release(KeyEvent(KEYUP, key='k'))
    tracking.on_release(KeyEvent(KEYUP, key='ctrl_l'))
    tracking.on_press(KeyEvent(KEYDOWN, key='c'))
    assert calls == [
        ('ctrl', ['ctrl'], KEYDOWN),
        ('k', ['ctrl'], KEYDOWN),
        ('k', ['ctrl'], KEYUP),
        ('ctrl', ['ctrl'], KEYUP),
        ('c', [], KEYDOWN),
    ]


def test_modifier_order_is_fixed():
    tracking, calls = collect()
    tracking.on_press(KeyEvent(KEYDOWN, key='shift_l'))
    tracking.on_press(KeyEvent(KEYDOWN, key='ctrl_r'))
    tracking.on_press(KeyEvent(KEYDOWN, key='a'))
    assert calls[-1] == ('a', ['ctrl', 'shift'], KEYDOWN)


def test_both_sides_must_be_released():
    tracking, calls = collect()
    tracking.on_press(KeyEvent(KEYDOWN, key='shift_l'))
    tracking.on_press(KeyEvent(KEYDOWN, key='shift_r'))
    tracking.on_release(KeyEvent(KEYUP, key='shift_l'))
    assert tracking.active_modifiers() == ['shift']
    tracking.on_release(KeyEvent(KEYUP, key='shift_r'))
    assert tracking.active_modifiers() == []


def test_reset():
    tracking, _ = collect()
    tracking.on_press(KeyEvent(KEYDOWN, key='alt_l'))
    tracking.reset()
    assert tracking.active_modifiers() == []
