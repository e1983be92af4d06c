"""Resolve the version string reported by ``photo-arrangement --version``."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from photo_arrangement.logging_utils import logger

DISTRIBUTION_NAMES = ("photo-arrangement", "photo_arrangement")
FALLBACK_VERSION = "0.0.0"


def _version_from_pyproject(start: Path) -> str | None:
    """Return project.version from the nearest pyproject.toml above start."""
    for parent in start.parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None
    return None


def resolve_project_version() -> str:
    """
    Return the installed version, else the source tree's, else a fallback.

    Source checkouts without an installed distribution read
    ``project.version`` from the closest pyproject.toml.
    """
    for distribution_name in DISTRIBUTION_NAMES:
        try:
            return importlib_metadata.version(distribution_name)
        except importlib_metadata.PackageNotFoundError:
            continue

    version = _version_from_pyproject(Path(__file__).resolve())
    return version or FALLBACK_VERSION
