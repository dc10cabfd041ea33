"""Version information for sequence-recorder.

The version comes from the installed distribution metadata; in a source
checkout without an install it is read from pyproject.toml, which also
carries the release date under [tool.sequence-recorder].
"""

import tomllib
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = 'sequence-recorder'


def _find_pyproject_toml() -> Path | None:
    """Find pyproject.toml in the project root (common/ -> src/ -> root)."""
    project_root = Path(__file__).resolve().parent.parent.parent
    pyproject_path = project_root / 'pyproject.toml'
    if pyproject_path.exists():
        return pyproject_path
    return None


@dataclass
class VersionInfo:
    """Version information dataclass.

    Attributes:
        version: Version string (e.g., "1.0.0")
        release_date: Release date string in ISO format (e.g., "2026-10-18"), or None
    """

    version: str
    release_date: str | None = None

    def __str__(self) -> str:
        if self.release_date:
            return f'v{self.version} ({self.release_date})'
        return f'v{self.version}'


def _read_pyproject(path: Path) -> dict:
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def get_version_info() -> VersionInfo:
    """Get version information.

    Returns:
        VersionInfo with version='unknown' when neither the distribution
        metadata nor pyproject.toml is available.
    """
    data: dict = {}
    pyproject_path = _find_pyproject_toml()
    if pyproject_path is not None:
        data = _read_pyproject(pyproject_path)

    release_date = data.get('tool', {}).get(DISTRIBUTION_NAME, {}).get('release_date')
    release_date_str = str(release_date) if release_date else None

    try:
        version = metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        version = data.get('project', {}).get('version')

    return VersionInfo(version=str(version) if version else 'unknown', release_date=release_date_str)


def get_version() -> str:
    """Get the version string, or 'unknown' if it cannot be determined."""
    return get_version_info().version


__version__ = get_version()
