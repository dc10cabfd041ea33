"""Configuration loader for sequence-recorder.

This module handles loading and validating TOML configuration files.
"""

import tomllib
from pathlib import Path
from typing import Any
from typing import ClassVar

from .models import AppConfig
from .models import RecorderConfig


class ConfigLoader:
    """Load and validate TOML configuration files."""

    DEFAULT_PATHS: ClassVar[list[Path]] = [
        Path.home() / '.config/sequence-recorder/config.toml',
        Path('/etc/sequence-recorder/config.toml'),
    ]

    @staticmethod
    def load(config_path: Path | None = None) -> tuple[AppConfig, Path | None]:
        """Load configuration from TOML file.

        Args:
            config_path: Path to config file. If None, tries default paths
                and falls back to built-in defaults when none exists.

        Returns:
            tuple[AppConfig, Path | None]: Parsed configuration and path to
                the loaded file (None when defaults were used)

        Raises:
            FileNotFoundError: If an explicit config_path does not exist
            ValueError: If configuration is invalid
            tomllib.TOMLDecodeError: If TOML syntax is invalid
        """
        if config_path:
            if not config_path.exists():
                raise FileNotFoundError(f'Config file not found: {config_path}')  # noqa: TRY003
            config = ConfigLoader._load_from_path(config_path)
            return (config, config_path.resolve())

        for path in ConfigLoader.DEFAULT_PATHS:
            if path.exists():
                config = ConfigLoader._load_from_path(path)
                return (config, path.resolve())

        return (AppConfig(), None)

    @staticmethod
    def _load_from_path(path: Path) -> AppConfig:
        """Load and parse TOML from specific path."""
        try:
            with path.open('rb') as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise tomllib.TOMLDecodeError(  # noqa: TRY003
                f'Invalid TOML syntax in {path}: {e}'
            ) from e

        return ConfigLoader.parse_config(data)

    @staticmethod
    def parse_config(data: dict[str, Any]) -> AppConfig:
        """Parse TOML data into AppConfig.

        Args:
            data: Parsed TOML data

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ValueError: If configuration is invalid
            TypeError: If a value has the wrong type
        """
        app_data = data.get('app', {})
        if not isinstance(app_data, dict):
            raise TypeError("'app' must be a table")  # noqa: TRY003

        log_level = app_data.get('log_level', 'INFO')
        if not isinstance(log_level, str):
            raise TypeError("'app.log_level' must be a string")  # noqa: TRY003

        log_file = None
        log_file_str = app_data.get('log_file')
        if log_file_str:
            if not isinstance(log_file_str, str):
                raise TypeError("'app.log_file' must be a string")  # noqa: TRY003
            log_file = Path(log_file_str).expanduser()

        backend = app_data.get('backend', 'evdev')
        if not isinstance(backend, str):
            raise TypeError("'app.backend' must be a string")  # noqa: TRY003

        device_name = app_data.get('device_name')
        if device_name is not None and not isinstance(device_name, str):
            raise TypeError("'app.device_name' must be a string")  # noqa: TRY003

        try:
            recorder = ConfigLoader._parse_recorder(data.get('recorder', {}))
        except ValueError as e:
            raise ValueError(f'Error in [recorder]: {e}') from e  # noqa: TRY003

        try:
            config = AppConfig(
                log_level=log_level.upper(),
                log_file=log_file,
                backend=backend.lower(),
                device_name=device_name or None,
                recorder=recorder,
            )
        except ValueError as e:
            raise ValueError(f'Invalid configuration: {e}') from e  # noqa: TRY003

        return config

    @staticmethod
    def _parse_recorder(data: dict[str, Any]) -> RecorderConfig:
        """Parse the [recorder] section.

        Raises:
            ValueError: If a value is out of range or a key is unknown
            TypeError: If a value has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError("'recorder' must be a table")  # noqa: TRY003

        unknown = set(data) - {'timeout', 'prevent_default', 'no_repeat'}
        if unknown:
            raise ValueError(f'Unknown keys: {", ".join(sorted(unknown))}')  # noqa: TRY003

        timeout = data.get('timeout', 1000)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise TypeError("'timeout' must be a number of milliseconds")  # noqa: TRY003

        for key in ('prevent_default', 'no_repeat'):
            if not isinstance(data.get(key, False), bool):
                raise TypeError(f"'{key}' must be a boolean")  # noqa: TRY003

        return RecorderConfig(
            timeout=timeout,
            prevent_default=data.get('prevent_default', False),
            no_repeat=data.get('no_repeat', False),
        )
