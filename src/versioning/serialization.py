"""JSON transport helpers for Version and ComparableVersion.

Both types travel as plain strings ("3.0.1", "^1.2.3", "~2.0.1-SNAPSHOT").
Decoding is strict: a string that does not match the grammar raises
VersionParseError instead of defaulting. None passes through as null.
"""

import json
from typing import Any, Optional

from common.exceptions import VersionParseError
from .models import ComparableVersion, Version


class VersionJSONEncoder(json.JSONEncoder):
    """JSON encoder that renders versions as their canonical strings."""

    def default(self, o):  # pylint: disable=method-hidden
        if isinstance(o, (Version, ComparableVersion)):
            return o.render()
        return super().default(o)


def version_to_json(value: Optional[Version]) -> Optional[str]:
    return None if value is None else value.render()


def comparable_version_to_json(value: Optional[ComparableVersion]) -> Optional[str]:
    return None if value is None else value.render()


def version_from_json(value: Any) -> Optional[Version]:
    """Decode a JSON value into a Version.

    Raises:
        VersionParseError: If ``value`` is not a valid version string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise VersionParseError(value)
    return Version.parse(value)


def comparable_version_from_json(value: Any) -> Optional[ComparableVersion]:
    """Decode a JSON value into a ComparableVersion.

    Raises:
        VersionParseError: If ``value`` is not a valid range string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise VersionParseError(value)
    return ComparableVersion.parse(value)


def dumps(obj: Any, **kwargs: Any) -> str:
    """``json.dumps`` with versions rendered as strings."""
    kwargs.setdefault("cls", VersionJSONEncoder)
    return json.dumps(obj, **kwargs)
