"""Logging helpers shared by the package utilities.

The level comes from the ``QILLETNI_LOG_LEVEL`` environment variable so that
callers embedding these modules can turn on debug output without code changes.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from constants import Constants

_HANDLER_NAME = "qilletni-pkgutil"


def resolve_log_level(value: Optional[str] = None) -> int:
    """Map a level name to a logging level, falling back to the default.

    Args:
        value: Level name such as "debug" or "WARNING". When None, the
            environment variable is consulted.

    Returns:
        int: A logging level constant.
    """
    if value is None:
        value = os.environ.get(Constants.ENV_LOG_LEVEL, Constants.DEFAULT_LOG_LEVEL)
    level = getattr(logging, str(value).strip().upper(), None)
    if not isinstance(level, int):
        return getattr(logging, Constants.DEFAULT_LOG_LEVEL)
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """Install the root handler once and apply the requested level.

    Repeated calls only update the level.
    """
    root = logging.getLogger()
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolve_log_level(level))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from ``logger`` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)
