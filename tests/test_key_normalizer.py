from common.key_normalizer import (
    format_combo,
    format_combo_toml,
    is_modifier_key,
    normalize_key,
    normalize_sequence,
    normalize_sequence_in_place,
    parse_combo,
    sort_combo,
)


def test_modifiers_sort_before_characters():
    assert format_combo({'k', 'ctrl'}) == 'ctrl+k'
    assert format_combo(['b', 'shift', 'a', 'alt']) == 'alt+shift+a+b'


def test_named_keys_count_as_modifiers():
    assert is_modifier_key('enter')
    assert is_modifier_key('f1')
    assert not is_modifier_key('7')
    assert sort_combo(['x', 'enter', 'ctrl']) == ['ctrl', 'enter', 'x']


def test_format_combo_is_idempotent():
    once = format_combo({'shift', 'ctrl', 'k'})
    assert once == 'ctrl+shift+k'
    assert format_combo(once) == once


def test_plus_key_survives_parsing():
    assert parse_combo('shift++') == ['shift', '+']
    assert parse_combo('+') == ['+']
    assert format_combo('shift++') == 'shift++'


def test_normalize_sequence_copies():
    sequence = [['k', 'ctrl'], ['c']]
    assert normalize_sequence(sequence) == ['ctrl+k', 'c']
    assert sequence == [['k', 'ctrl'], ['c']]


def test_normalize_sequence_in_place_replaces_combos():
    sequence = [['k', 'ctrl'], ['c']]
    result = normalize_sequence_in_place(sequence)
    assert result is sequence
    assert sequence == ['ctrl+k', 'c']


def test_normalize_key():
    assert normalize_key('A') == 'a'
    assert normalize_key('ctrl_l') == 'ctrl_l'


def test_format_combo_toml():
    assert format_combo_toml('shift+ctrl+k') == ['ctrl', 'shift', 'k']
