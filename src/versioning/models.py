"""Data models for versions and range-qualified version constraints."""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import semantic_version

from constants import Constants
from .parser import tokenize_range_prefix, tokenize_version


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A major.minor.patch version with an optional snapshot flag.

    Equality, hashing and ordering use (major, minor, patch) only. The
    snapshot flag is kept for rendering.
    """
    major: int
    minor: int
    patch: int
    is_snapshot: bool = False

    def __post_init__(self):
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Version {name} must be a non-negative integer, got {value!r}")
        object.__setattr__(self, "is_snapshot", bool(self.is_snapshot))

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse ``<major>.<minor>.<patch>[-SNAPSHOT]``.

        Raises:
            VersionParseError: If ``text`` does not match the grammar.
        """
        major, minor, patch, snapshot = tokenize_version(text)
        return cls(major, minor, patch, snapshot)

    @property
    def semver(self) -> semantic_version.Version:
        """The numeric triple as a ``semantic_version.Version`` (no prerelease)."""
        return semantic_version.Version(major=self.major, minor=self.minor, patch=self.patch)

    def render(self) -> str:
        suffix = Constants.SNAPSHOT_SUFFIX if self.is_snapshot else ""
        return f"{self.major}.{self.minor}.{self.patch}{suffix}"

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 comparing (major, minor, patch)."""
        a, b = self.semver, other.semver
        return (a > b) - (a < b)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.semver == other.semver

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return self.semver < other.semver

    def __hash__(self):
        return hash((self.major, self.minor, self.patch))

    def __str__(self):
        return self.render()


class RangeSpecifier(Enum):
    """How a constraint's version bounds acceptable candidates."""
    EXACT = "\0"
    CARET = "^"
    TILDE = "~"

    @property
    def specifier(self) -> str:
        """The prefix character; ``"\\0"`` for EXACT."""
        return self.value

    @property
    def prefix(self) -> str:
        """The text rendered before the version; empty for EXACT."""
        return "" if self is RangeSpecifier.EXACT else self.value

    @classmethod
    def from_prefix(cls, char: Optional[str]) -> "RangeSpecifier":
        """Return the variant for ``char``, EXACT for anything unrecognized."""
        if char == cls.CARET.value:
            return cls.CARET
        if char == cls.TILDE.value:
            return cls.TILDE
        return cls.EXACT

    def matches(self, base: Version, candidate: Version) -> bool:
        """Return True if ``candidate`` falls within the range anchored at ``base``."""
        if self is RangeSpecifier.EXACT:
            return candidate == base
        if candidate < base:
            return False
        if self is RangeSpecifier.TILDE or base.major == 0:
            # ^0.x.y narrows to the same minor, like ~
            return candidate.major == base.major and candidate.minor == base.minor
        return candidate.major == base.major


@dataclass(frozen=True)
class ComparableVersion:
    """A version plus the range specifier it was written with, e.g. ``^1.2.3``."""
    version: Version
    range_specifier: RangeSpecifier = RangeSpecifier.EXACT

    @classmethod
    def parse(cls, text: str) -> "ComparableVersion":
        """Parse ``[^|~]<major>.<minor>.<patch>[-SNAPSHOT]``.

        Raises:
            VersionParseError: If the version part does not match the grammar.
        """
        prefix, rest = tokenize_range_prefix(text)
        return cls(Version.parse(rest), RangeSpecifier.from_prefix(prefix))

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    @property
    def patch(self) -> int:
        return self.version.patch

    @property
    def is_snapshot(self) -> bool:
        return self.version.is_snapshot

    def satisfies(self, candidate: Version) -> bool:
        """Return True if ``candidate`` is accepted by this constraint.

        Snapshot flags on either side are ignored.
        """
        return self.range_specifier.matches(self.version, candidate)

    def render(self) -> str:
        return self.range_specifier.prefix + self.version.render()

    def __str__(self):
        return self.render()
