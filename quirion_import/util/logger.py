"""
Package logger.

- get_logger(): the ``quirion_import`` logger with one StreamHandler attached
  the first time it's asked for. Level comes from QUIRION_IMPORT_LOG_LEVEL
  (name or number), INFO otherwise.
- set_level(level): override the level later (CLI --log-level).

Modules call ``get_logger()`` inside the function that logs; nothing else in
the package attaches handlers.
"""

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "quirion_import"
LOG_LEVEL_ENV = "QUIRION_IMPORT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def _parse_level(level: Optional[Union[int, str]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def get_logger() -> logging.Logger:
    """Return the package logger, attaching the stream handler once."""
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_parse_level(os.getenv(LOG_LEVEL_ENV)))
        # avoid double emission via the root logger
        logger.propagate = False
        _configured = True
    return logger


def set_level(level: Union[int, str]) -> None:
    get_logger().setLevel(_parse_level(level))
