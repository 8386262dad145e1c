"""Single source of truth for the swatchbook version."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

PACKAGE_NAME = "swatchbook"

# src/swatchbook/_version.py -> repository root
_SOURCE_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def version_from_pyproject(pyproject: Path) -> str | None:
    """Read [project].version, but only from swatchbook's own pyproject.toml."""
    if not pyproject.is_file():
        return None
    try:
        project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    except tomllib.TOMLDecodeError:
        return None
    if project.get("name") != PACKAGE_NAME:
        return None
    return project.get("version")


def get_version(pyproject: Path = _SOURCE_PYPROJECT) -> str:
    """Version from a source checkout, else installed metadata, else 0.0.0."""
    source_version = version_from_pyproject(pyproject)
    if source_version:
        return source_version
    try:
        return _metadata_version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
