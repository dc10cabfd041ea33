from sequence_recorder.formatter import (
    format_header,
    format_progress,
    format_sequence_recorded,
    format_toml_list,
)
from sequence_recorder.models import RecorderConfig


def test_format_toml_list_escapes():
    assert format_toml_list(['ctrl+k', 'c']) == '["ctrl+k", "c"]'
    assert format_toml_list(['"', '\\']) == '["\\"", "\\\\"]'


def test_format_toml_list_escapes_control_characters():
    # pynput reports ctrl+k as a vertical tab
    assert format_toml_list(['\x0b']) == '["\\u000b"]'
    assert format_toml_list(['a\tb', '\x7f']) == '["a\\u0009b", "\\u007f"]'


def test_format_sequence_recorded_escapes_control_characters():
    output = format_sequence_recorded(['ctrl+\x0b'])
    assert 'sequence = ["ctrl+\\u000b"]' in output


def test_format_sequence_recorded():
    output = format_sequence_recorded(['ctrl+k', 'c'])
    assert 'Sequence recorded: ctrl+k c' in output
    assert 'sequence = ["ctrl+k", "c"]' in output
    assert "1. ctrl+k  ['ctrl', 'k']" in output


def test_format_empty_sequence():
    assert 'Nothing recorded' in format_sequence_recorded([])


def test_format_header():
    output = format_header(RecorderConfig(timeout=1500, no_repeat=True), 'pynput')
    assert 'Backend: pynput' in output
    assert 'Idle timeout: 1500ms' in output
    assert 'auto-repeat ignored' in output


def test_format_progress():
    assert 'ctrl+k shift' in format_progress(['ctrl+k', 'shift'])
