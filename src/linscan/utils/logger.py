"""Logging helpers for linscan.

Every module logs through a logger under the ``linscan`` namespace. Library
code only emits records; the command line attaches the one handler, so
embedding applications keep full control of their logging setup.

Example:
    >>> from linscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %s", "script.lin")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "linscan"

# One record per line, no timestamps
DEBUG_FORMAT = "%(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the linscan namespace.

    >>> get_logger("mymodule").name
    'linscan.mymodule'
    """
    if not (name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + ".")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def enable_debug_logging(stream: TextIO | None = None) -> logging.Handler:
    """Send linscan DEBUG records to ``stream`` (stderr by default).

    Only the ``linscan`` logger is touched; the root logger and other
    libraries keep their configuration. Calling it again replaces the
    handler installed by the previous call.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_linscan_debug", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    handler._linscan_debug = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler
