"""Reader and writer for qilletni.lock files.

Format::

    version: 1
    packages:
      "@alice/postgres@1.0.2":
        version: 1.0.2
        resolved: https://registry.../packages/@alice/postgres/1.0.2
        integrity: sha256-abc123...
        dependencies:
          "@bob/json": "^2.0.0"

Packages are kept in insertion order, which is also the order they are
written in. Parsing is all-or-nothing: one bad entry fails the whole file.
"""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

import yaml

from common.exceptions import (
    EmptyLockFileError,
    LockFileNotFoundError,
    MalformedLockFileError,
    PathLike,
)
from common.logging_utils import is_debug_enabled
from constants import Constants
from .models import ResolvedPackage

logger = logging.getLogger(__name__)


def extract_name_from_key(key: str) -> str:
    """Return the package name part of a ``name@version`` key.

    The split point is the last "@", since scoped names start with one
    ("@alice/postgres@1.0.2" -> "@alice/postgres"). A key with no "@", or
    whose only "@" is the leading scope marker, is returned whole.
    """
    idx = key.rfind("@")
    if idx > 0:
        return key[:idx]
    return key


def _require_str(value: Any, field_name: str, key: str, path: PathLike) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise MalformedLockFileError(
        f"Field '{field_name}' of '{key}' must be a string, got {type(value).__name__}", path
    )


def _read_dependencies(value: Any, key: str, path: PathLike) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MalformedLockFileError(f"Dependencies of '{key}' must be a mapping", path)
    deps: Dict[str, str] = {}
    for dep_name, dep_range in value.items():
        if not isinstance(dep_name, str) or not isinstance(dep_range, str):
            raise MalformedLockFileError(
                f"Dependency entries of '{key}' must map names to range strings", path
            )
        deps[dep_name] = dep_range
    return deps


class LockFile:
    """An ordered set of resolved packages keyed by full identifier."""

    def __init__(
        self,
        version: int = Constants.LOCKFILE_VERSION,
        packages: Optional[Mapping[str, ResolvedPackage]] = None,
    ):
        self._version = version
        self._packages: Dict[str, ResolvedPackage] = {}
        for pkg in (packages or {}).values():
            self.add_package(pkg)

    @property
    def version(self) -> int:
        return self._version

    @property
    def packages(self) -> Mapping[str, ResolvedPackage]:
        """Read-only view of the packages keyed by full identifier."""
        return MappingProxyType(self._packages)

    def add_package(self, pkg: ResolvedPackage) -> None:
        """Insert ``pkg`` under its full identifier, replacing any existing entry."""
        self._packages[pkg.full_identifier] = pkg

    def remove_package(self, full_identifier: str) -> Optional[ResolvedPackage]:
        """Remove and return the package stored under ``full_identifier``, if any."""
        return self._packages.pop(full_identifier, None)

    def get(self, full_identifier: str) -> Optional[ResolvedPackage]:
        return self._packages.get(full_identifier)

    def __contains__(self, full_identifier: object) -> bool:
        return full_identifier in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[ResolvedPackage]:
        return iter(self._packages.values())

    def __repr__(self) -> str:
        return f"LockFile{{version={self._version}, packages={len(self._packages)}}}"

    @classmethod
    def parse(cls, lockfile_path: PathLike) -> "LockFile":
        """Parse a lock file from disk.

        Args:
            lockfile_path: Path to the qilletni.lock file

        Returns:
            LockFile: The fully populated lock file

        Raises:
            LockFileNotFoundError: If the file does not exist.
            EmptyLockFileError: If the document is empty.
            MalformedLockFileError: If the YAML is invalid or has the wrong shape.
            ValidationError: If an entry is missing a required field.
        """
        if not os.path.exists(lockfile_path):
            logger.warning("Lock file not found: %s", lockfile_path)
            raise LockFileNotFoundError(lockfile_path)

        try:
            with open(lockfile_path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise MalformedLockFileError("Lock file is not valid UTF-8", lockfile_path) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.warning("Failed to parse lock file %s: %s", lockfile_path, e)
            raise MalformedLockFileError(f"Invalid YAML ({e})", lockfile_path) from e

        if data is None or (isinstance(data, str) and not data.strip()):
            raise EmptyLockFileError(lockfile_path)
        if not isinstance(data, dict):
            raise MalformedLockFileError("Lock file must be a mapping", lockfile_path)

        version = data.get("version", Constants.LOCKFILE_VERSION)
        if isinstance(version, bool) or not isinstance(version, int):
            raise MalformedLockFileError(f"Lock file version must be an integer, got {version!r}", lockfile_path)

        packages_data = data.get("packages")
        if packages_data is None:
            packages_data = {}
        if not isinstance(packages_data, dict):
            raise MalformedLockFileError("'packages' must be a mapping", lockfile_path)

        lock = cls(version)
        for key, pkg_data in packages_data.items():
            if not isinstance(key, str):
                raise MalformedLockFileError(f"Package key {key!r} must be a string", lockfile_path)
            if not isinstance(pkg_data, dict):
                raise MalformedLockFileError(f"Entry for '{key}' must be a mapping", lockfile_path)

            pkg = ResolvedPackage(
                name=extract_name_from_key(key),
                version=_require_str(pkg_data.get("version"), "version", key, lockfile_path),
                resolved=_require_str(pkg_data.get("resolved"), "resolved", key, lockfile_path),
                integrity=_require_str(pkg_data.get("integrity"), "integrity", key, lockfile_path),
                dependencies=_read_dependencies(pkg_data.get("dependencies"), key, lockfile_path),
            )
            if pkg.full_identifier != key:
                logger.warning(
                    "Lock file key '%s' does not match its entry; storing as '%s'",
                    key,
                    pkg.full_identifier,
                )
            if pkg.full_identifier in lock:
                raise MalformedLockFileError(
                    f"Entry '{key}' duplicates package '{pkg.full_identifier}'", lockfile_path
                )
            lock.add_package(pkg)

        if is_debug_enabled(logger):
            logger.debug("Parsed %s: %r", lockfile_path, lock)
        return lock

    def to_dict(self) -> Dict[str, Any]:
        """Return the document written by :meth:`write`."""
        packages: Dict[str, Dict[str, Any]] = {}
        for full_id, pkg in self._packages.items():
            packages[full_id] = {
                "version": pkg.version,
                "resolved": pkg.resolved,
                "integrity": pkg.integrity,
                "dependencies": dict(pkg.dependencies),
            }
        return {"version": self._version, "packages": packages}

    def write(self, lockfile_path: PathLike) -> None:
        """Write the lock file to ``lockfile_path``, overwriting it.

        Raises:
            OSError: If the file cannot be written.
        """
        content = yaml.safe_dump(
            self.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
        try:
            with open(lockfile_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.warning("Failed to write lock file %s: %s", lockfile_path, e)
            raise
        logger.debug("Wrote %d packages to %s", len(self._packages), lockfile_path)
