"""Locate the manifest and lock file of a Qilletni package.

The working directory is either the package root, holding ``qilletni-src``,
or ``qilletni-src`` itself. Files are looked up in the base directory first
and in ``qilletni-src`` only when missing there.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from common.exceptions import PathLike
from constants import Constants


class ManifestFinder:
    """Resolves manifest and lock file paths against a base directory.

    Args:
        base_dir: Directory to resolve against. None means the process working
            directory at call time, and returned paths stay relative.
    """

    def __init__(self, base_dir: Optional[PathLike] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def _resolve(self, name: str) -> Path:
        if self.base_dir is None:
            return Path(name)
        return self.base_dir / name

    def _existing_path_in_src(self, filename: str) -> Path:
        """Return ``filename`` in the base dir, or in ``qilletni-src`` if only that exists.

        The returned path is not guaranteed to exist.
        """
        path = self._resolve(filename)
        src_dir = self._resolve(Constants.SRC_DIR)
        if not path.exists() and src_dir.exists():
            path = src_dir / filename
        return path

    def get_manifest(self) -> Path:
        return self._existing_path_in_src(Constants.MANIFEST_FILE)

    def get_lockfile(self) -> Path:
        return self._existing_path_in_src(Constants.LOCK_FILE)

    def has_manifest(self) -> bool:
        return self.get_manifest().exists()


def get_manifest() -> Path:
    """Manifest path relative to the current working directory."""
    return ManifestFinder().get_manifest()


def get_lockfile() -> Path:
    """Lock file path relative to the current working directory."""
    return ManifestFinder().get_lockfile()


def has_manifest() -> bool:
    return ManifestFinder().has_manifest()
