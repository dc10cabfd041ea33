"""Main entry point for the sequence-recorder CLI application."""

import sys
from pathlib import Path

import typer

from common.backends import BackendNotAvailableError
from common.backends import KeyboardBackend
from common.backends import create_backend
from common.backends import list_keyboard_devices
from common.logging_utils import get_logger
from common.logging_utils import setup_logging_handler
from common.version import get_version_info

from .config_loader import ConfigLoader
from .dispatcher import KeyDispatcher
from .formatter import format_header
from .formatter import format_progress
from .formatter import format_sequence_recorded
from .keystream import ModifierTracking
from .models import AppConfig
from .shim import RecordingShim

app = typer.Typer(help='🎹 Sequence Recorder - Record keyboard key sequences')


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f'sequence-recorder {get_version_info()}')
        raise typer.Exit()


def _load_config(config: Path | None) -> AppConfig:
    """Load configuration, exiting with a message on error."""
    try:
        app_config, _config_path = ConfigLoader.load(config)
    except FileNotFoundError as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e
    except (ValueError, TypeError) as e:
        typer.echo(f'❌ Failed to load config: {e}', err=True)
        raise typer.Exit(1) from e
    return app_config


def run_recorder(
    backend: KeyboardBackend,
    shim: RecordingShim,
    count: int | None = None,
    show_progress: bool = False,
) -> int:
    """Record sequences from the backend until interrupted or `count` are done.

    Returns:
        int: Number of sequences recorded
    """
    logger = get_logger('sequence_recorder.main')
    tracking = ModifierTracking(shim.handle_key)
    recorded = 0

    def on_progress(partial: list[str]) -> None:
        sys.stdout.write(format_progress(partial))
        sys.stdout.flush()

    def on_complete(sequence: list[str]) -> None:
        nonlocal recorded
        recorded += 1
        if show_progress:
            sys.stdout.write('\r\033[K')
        sys.stdout.write(format_sequence_recorded(sequence))
        sys.stdout.flush()
        if count is not None and recorded >= count:
            logger.info('Recorded %d sequence(s), stopping', recorded)
            backend.stop()
            return
        record_next()

    def record_next() -> None:
        shim.record(on_complete, progress_callback=on_progress if show_progress else None)

    record_next()
    try:
        backend.start(on_press=tracking.on_press, on_release=tracking.on_release)
    finally:
        shim.cancel()
    return recorded


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        '--config', '-c',
        help='Path to config file (default: ~/.config/sequence-recorder/config.toml)',
    ),
    timeout: int | None = typer.Option(
        None,
        '--timeout', '-t',
        min=0,
        help='Idle timeout in milliseconds that ends a sequence (default: 1000)',
    ),
    prevent_default: bool | None = typer.Option(
        None,
        '--prevent-default/--no-prevent-default',
        help='Keep recorded keys from reaching other applications (evdev only)',
    ),
    no_repeat: bool | None = typer.Option(
        None,
        '--no-repeat/--repeat',
        help='Ignore auto-repeated key presses while recording',
    ),
    progress: bool = typer.Option(
        False,
        '--progress', '-p',
        help='Show the sequence while it is being typed',
    ),
    count: int | None = typer.Option(
        None,
        '--count', '-n',
        min=1,
        help='Exit after recording this many sequences',
    ),
    backend_name: str | None = typer.Option(
        None,
        '--backend', '-b',
        help='Keyboard backend: evdev (default) or pynput',
    ),
    device_name: str | None = typer.Option(
        None,
        '--device-name',
        help='Force specific keyboard device by name (partial match, case-insensitive)',
    ),
    verbose: bool = typer.Option(
        False,
        '--verbose', '-v',
        help='Enable debug logging on stderr',
    ),
    version: bool = typer.Option(
        False,
        '--version',
        callback=_version_callback,
        is_eager=True,
        help='Show version and exit',
    ),
) -> None:
    """
    Record keyboard key sequences and print them in normalized form.

    Keys pressed together form one combo ("ctrl+k"); combos typed one after
    another form a sequence, which ends after the idle timeout.

    Usage examples:

        $ sequence-recorder

        $ sequence-recorder --timeout 1500 --progress

        $ sequence-recorder --prevent-default --no-repeat --count 1

    Press Ctrl+C to exit the recorder.
    """
    if ctx.invoked_subcommand is not None:
        return

    app_config = _load_config(config)
    if verbose:
        app_config.log_level = 'DEBUG'

    setup_logging_handler(
        get_logger(),
        log_level=app_config.log_level,
        foreground=verbose or app_config.log_file is None,
        log_file=app_config.log_file,
    )

    recorder_config = app_config.recorder.merge(
        timeout=timeout,
        prevent_default=prevent_default,
        no_repeat=no_repeat,
    )

    name = (backend_name or app_config.backend).lower()
    kwargs = {'grab': recorder_config.prevent_default} if name == 'evdev' else {}
    try:
        backend = create_backend(name, device_name=device_name or app_config.device_name, **kwargs)
    except (BackendNotAvailableError, ValueError) as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e

    if recorder_config.prevent_default and not backend.supports_suppression():
        typer.echo(f'⚠️  {backend.get_backend_name()} cannot suppress keys; --prevent-default has no effect', err=True)

    sys.stdout.write(format_header(recorder_config, backend.get_backend_name(), backend.supports_suppression()))
    sys.stdout.flush()

    shim = RecordingShim(KeyDispatcher(), recorder_config)
    try:
        run_recorder(backend, shim, count=count, show_progress=progress)
    except BackendNotAvailableError as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        sys.stdout.write('\n\n👋 Exiting sequence recorder. Goodbye!\n')


@app.command(name='device-list')
def device_list() -> None:
    """List all available keyboard devices.

    Use the device name with the --device-name option to record from a
    specific keyboard.

    Example:
        $ sequence-recorder device-list
        $ sequence-recorder --device-name "A4tech"
    """
    try:
        devices = list_keyboard_devices()
    except (BackendNotAvailableError, PermissionError) as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e

    if not devices:
        typer.echo('❌ No keyboard devices found')
        raise typer.Exit(1)

    typer.echo('📱 Available keyboard devices:\n')
    for i, device in enumerate(devices, 1):
        suffix = ' [VIRTUAL]' if device['is_virtual'] else ''
        typer.echo(f'  {i}. {device["name"]}{suffix}')
        typer.echo(f'     Path: {device["path"]}')

    physical = [d for d in devices if not d['is_virtual']]
    if physical:
        example_name = physical[0]['name'].split()[0]
        typer.echo(f'\n💡 To use a specific device:\n   sequence-recorder --device-name "{example_name}"')


if __name__ == '__main__':
    app()
