"""Logger bootstrap for head-shell diagnostics.

User-facing errors are written to the command's ErrorStream. This logger is
for tracing resolution and emission while debugging, and stays quiet at the
default WARNING level.
"""

import logging
import sys
from typing import Optional, TextIO, Union

LOGGER_NAME = 'head_shell'
LOG_LEVEL_ENV = 'HEAD_SHELL_LOG_LEVEL'
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def parse_level(value: Optional[Union[str, int]]) -> int:
    """
    Turn a level name or number into a logging level.

    Unknown names fall back to the default level.

    Example:
        >>> parse_level('debug')
        10
    """
    if value is None or value == '':
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def setup_logger(level: Optional[Union[str, int]] = None,
                 stream: Optional[TextIO] = None) -> logging.Logger:
    """Set up the package logger with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(parse_level(level))

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


__all__ = ['LOGGER_NAME', 'LOG_LEVEL_ENV', 'parse_level', 'setup_logger']
