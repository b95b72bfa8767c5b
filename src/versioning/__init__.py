"""Version parsing, ordering and range matching."""

from .models import ComparableVersion, RangeSpecifier, Version

__all__ = [
    "ComparableVersion",
    "RangeSpecifier",
    "Version",
]
