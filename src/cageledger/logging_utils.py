"""Logging helpers for cageledger.

Modules create a module-level ``LOGGER = get_logger(__name__)``. A stderr
handler is installed once on the ``cageledger`` logger, so repeated CLI
invocations inside one process (as in the test suite) do not stack
duplicate handlers.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DEFAULT_LEVEL = "WARNING"


def resolve_level(level: Optional[str | int] = None) -> int:
    """Turn a level name or number into a logging level.

    Falls back to ``CAGELEDGER_LOG_LEVEL`` and then to WARNING.
    """
    if level is None:
        level = os.environ.get("CAGELEDGER_LOG_LEVEL", DEFAULT_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: '{level}'")
    return resolved


def configure_root_logger(level: Optional[str | int] = None) -> None:
    """Set the cageledger log level and install the stderr handler once."""

    global _LOGGER_INITIALISED
    package_logger = logging.getLogger("cageledger")
    package_logger.setLevel(resolve_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    package_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""
    return logging.getLogger(name)
