"""Lock file persistence and manifest lookup."""

from .finder import ManifestFinder
from .lockfile import LockFile
from .models import ResolvedPackage

__all__ = [
    "LockFile",
    "ManifestFinder",
    "ResolvedPackage",
]
