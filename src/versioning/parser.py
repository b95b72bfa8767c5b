"""Token parsing utilities for version and range strings.

Grammar::

    range   := [ "^" | "~" ] version
    version := uint "." uint "." uint [ "-SNAPSHOT" ]

The suffix is case-sensitive. Anything else is rejected with
``VersionParseError``; nothing is guessed or defaulted.
"""

import re
from typing import Optional, Tuple

from common.exceptions import VersionParseError
from constants import Constants

RANGE_PREFIXES = ("^", "~")

_VERSION_RE = re.compile(
    r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)(?P<snapshot>"
    + re.escape(Constants.SNAPSHOT_SUFFIX)
    + r")?"
)


def tokenize_version(text: str) -> Tuple[int, int, int, bool]:
    """Split a version string into (major, minor, patch, is_snapshot).

    Raises:
        VersionParseError: If ``text`` is not a string or does not match the grammar.
    """
    if not isinstance(text, str):
        raise VersionParseError(text)
    m = _VERSION_RE.fullmatch(text)
    if m is None:
        raise VersionParseError(text)
    return (
        int(m.group("major")),
        int(m.group("minor")),
        int(m.group("patch")),
        m.group("snapshot") is not None,
    )


def tokenize_range_prefix(text: str) -> Tuple[Optional[str], str]:
    """Return (prefix or None, remainder) for a range string.

    Only the first character is inspected; the remainder is not validated here.
    """
    if not isinstance(text, str):
        raise VersionParseError(text)
    if text[:1] in RANGE_PREFIXES:
        return text[0], text[1:]
    return None, text
