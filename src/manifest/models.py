"""Data models for resolved packages."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from common.exceptions import EmptyFieldError, ValidationError

# (attribute, label used in error messages)
_REQUIRED_FIELDS = (
    ("name", "name"),
    ("version", "version"),
    ("resolved", "resolved URL"),
    ("integrity", "integrity"),
)


@dataclass(frozen=True)
class ResolvedPackage:
    """A resolved dependency as recorded in the lock file.

    ``dependencies`` maps each direct dependency name to the range string it
    was requested with (e.g. ``{"@bob/json": "^2.0.0"}``). It is exposed
    as a read-only mapping.
    """
    name: str  # may carry a scope, e.g. "@alice/postgres"
    version: str
    resolved: str
    integrity: str  # opaque digest, conventionally "<algorithm>-<digest>"
    dependencies: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        for attr, label in _REQUIRED_FIELDS:
            value = getattr(self, attr)
            if value is None or value == "":
                raise EmptyFieldError(attr, label)
            if not isinstance(value, str):
                raise ValidationError(f"Package {label} must be a string, got {type(value).__name__}")
        deps = {} if self.dependencies is None else dict(self.dependencies)
        for dep_name, dep_range in deps.items():
            if not isinstance(dep_name, str) or not isinstance(dep_range, str):
                raise ValidationError(
                    f"Package dependencies must map names to range strings, got {dep_name!r}: {dep_range!r}"
                )
        object.__setattr__(self, "dependencies", MappingProxyType(deps))

    @classmethod
    def create(
        cls,
        name: str,
        version: str,
        resolved: str,
        integrity: str,
        dependencies: Optional[Mapping[str, str]] = None,
    ) -> "ResolvedPackage":
        """Build a validated package record.

        Raises:
            EmptyFieldError: If name, version, resolved or integrity is None or empty.
            ValidationError: If a field or dependency entry is not a string.
        """
        return cls(name, version, resolved, integrity, dict(dependencies or {}))

    @property
    def full_identifier(self) -> str:
        """The ``name@version`` key used wherever packages are stored."""
        return f"{self.name}@{self.version}"
