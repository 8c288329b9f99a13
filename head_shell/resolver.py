"""
Input resolution - map an input token to an open InputStream.
"""

import logging
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from .exceptions import OpenError, describe_os_error
from .streams import InputStream, STDIN_NAME

logger = logging.getLogger(__name__)

STDIN_TOKEN = STDIN_NAME


def resolve_input(token: str, stdin: Optional[BinaryIO] = None) -> InputStream:
    """
    Resolve one input token.

    Args:
        token: A file path, or "-" for standard input
        stdin: Binary stream standing in for the process stdin

    Returns:
        An open InputStream; nothing has been read from it yet

    Raises:
        OpenError: If the path cannot be opened for reading
    """
    if token == STDIN_TOKEN:
        logger.debug("resolved %r to standard input", token)
        return InputStream.from_stdin(stdin)

    try:
        stream = InputStream.from_path(token)
    except OSError as e:
        logger.debug("failed to open %r: %s", token, e)
        raise OpenError(token, describe_os_error(e)) from e

    logger.debug("opened %r", token)
    return stream


@contextmanager
def open_input(token: str, stdin: Optional[BinaryIO] = None) -> Iterator[InputStream]:
    """
    Context manager form of resolve_input.

    The stream is closed when the block exits, whether or not it raised.

    Example:
        with open_input('notes.txt') as stream:
            print(stream.readline())
    """
    stream = resolve_input(token, stdin)
    try:
        yield stream
    finally:
        stream.close()
