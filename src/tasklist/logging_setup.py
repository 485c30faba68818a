"""Logging configuration for the tasklist CLI."""

import logging
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure the root logger.

    Logs go to stderr so they never mix with command output. ``verbose``
    forces DEBUG; otherwise ``level`` (a level name) applies. Calling it
    again replaces the handler installed by the previous call.
    """
    global _handler

    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName(str(level).upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    root = logging.getLogger()
    root.setLevel(resolved)

    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
