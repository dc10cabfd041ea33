from sequence_recorder.accumulator import KeyAccumulator


def test_add_is_idempotent():
    acc = KeyAccumulator()
    assert acc.add('ctrl')
    assert not acc.add('ctrl')
    assert len(acc) == 1
    assert acc.keys() == ['ctrl']


def test_character_key_flag():
    acc = KeyAccumulator()
    acc.add('shift')
    assert not acc.has_character_key
    acc.add('a')
    assert acc.has_character_key
    assert acc.contains('a')
    assert 'shift' in acc


def test_clear_resets_flag():
    acc = KeyAccumulator()
    acc.add('a')
    acc.clear()
    assert not acc
    assert not acc.has_character_key
    assert not acc.contains('a')


def test_keys_returns_snapshot():
    acc = KeyAccumulator()
    acc.add('a')
    snapshot = acc.keys()
    acc.add('b')
    assert snapshot == ['a']
