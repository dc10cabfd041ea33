import tomllib
from pathlib import Path

import pytest

from sequence_recorder.config_loader import ConfigLoader
from sequence_recorder.models import AppConfig, RecorderConfig


def test_defaults_when_no_file(monkeypatch, tmp_path):
    monkeypatch.setattr(ConfigLoader, 'DEFAULT_PATHS', [tmp_path / 'missing.toml'])
    config, path = ConfigLoader.load()
    assert path is None
    assert config == AppConfig()
    assert config.recorder == RecorderConfig(timeout=1000, prevent_default=False, no_repeat=False)


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load(tmp_path / 'nope.toml')


def test_load_full_file(tmp_path):
    path = tmp_path / 'config.toml'
    path.write_text(
        '[app]\n'
        'log_level = "debug"\n'
        'log_file = "~/recorder.log"\n'
        'backend = "pynput"\n'
        'device_name = "A4tech"\n'
        '\n'
        '[recorder]\n'
        'timeout = 1500\n'
        'prevent_default = true\n'
        'no_repeat = true\n'
    )
    config, loaded_from = ConfigLoader.load(path)
    assert loaded_from == path.resolve()
    assert config.log_level == 'DEBUG'
    assert config.log_file == Path('~/recorder.log').expanduser()
    assert config.backend == 'pynput'
    assert config.device_name == 'A4tech'
    assert config.recorder == RecorderConfig(timeout=1500, prevent_default=True, no_repeat=True)


def test_default_path_is_used(monkeypatch, tmp_path):
    path = tmp_path / 'config.toml'
    path.write_text('[recorder]\ntimeout = 300\n')
    monkeypatch.setattr(ConfigLoader, 'DEFAULT_PATHS', [tmp_path / 'missing.toml', path])
    config, loaded_from = ConfigLoader.load()
    assert loaded_from == path.resolve()
    assert config.recorder.timeout == 300


def test_invalid_toml(tmp_path):
    path = tmp_path / 'config.toml'
    path.write_text('[recorder\n')
    with pytest.raises(tomllib.TOMLDecodeError):
        ConfigLoader.load(path)


@pytest.mark.parametrize(
    ('data', 'error'),
    [
        ({'recorder': {'timeout': -5}}, ValueError),
        ({'recorder': {'timeout': 'fast'}}, TypeError),
        ({'recorder': {'no_repeat': 'yes'}}, TypeError),
        ({'recorder': {'timeot': 10}}, ValueError),
        ({'app': {'log_level': 'LOUD'}}, ValueError),
        ({'app': {'backend': 'x11'}}, ValueError),
        ({'app': {'device_name': 3}}, TypeError),
    ],
)
def test_invalid_values(data, error):
    with pytest.raises(error):
        ConfigLoader.parse_config(data)


def test_recorder_config_merge():
    base = RecorderConfig(timeout=800, prevent_default=True)
    assert base.merge() == base
    assert base.merge(timeout=0, prevent_default=False) == RecorderConfig(timeout=0, prevent_default=False)
    assert RecorderConfig.from_options({'no_repeat': True}) == RecorderConfig(no_repeat=True)
