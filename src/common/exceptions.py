"""Exception types raised by the versioning and manifest modules."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class VersionParseError(ValueError):
    """Raised when a version or range string does not match the grammar."""

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"Invalid version string: {text!r}")


class ValidationError(ValueError):
    """Raised when a record is constructed with invalid field values."""


class EmptyFieldError(ValidationError):
    """Raised when a required field is None or empty."""

    def __init__(self, field_name: str, label: str):
        self.field_name = field_name
        super().__init__(f"Package {label} cannot be null or empty")


class LockFileError(OSError):
    """Base class for lock file read/write failures."""

    def __init__(self, message: str, path: PathLike):
        self.path = path
        super().__init__(f"{message}: {os.fspath(path)}")


class LockFileNotFoundError(LockFileError, FileNotFoundError):
    """Raised when the lock file does not exist."""

    def __init__(self, path: PathLike):
        super().__init__("Lock file not found", path)


class EmptyLockFileError(LockFileError):
    """Raised when the lock file decodes to an empty document."""

    def __init__(self, path: PathLike):
        super().__init__("Lock file is empty or invalid", path)


class MalformedLockFileError(LockFileError):
    """Raised when the lock file is not valid YAML or has the wrong shape."""
