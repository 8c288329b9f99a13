"""
Output emission - headers, separators and bounded content for each input.

For every token the emitter resolves the input, writes a header when the run
has several inputs, then copies either the first lines or the first bytes.
Open failures are reported on the error stream and skipped. Read failures
raise ReadError and end the run.
"""

import logging
from typing import BinaryIO, Optional

from .context import Invocation, RunState
from .exceptions import OpenError, ReadError, describe_os_error
from .resolver import open_input
from .streams import ErrorStream, InputStream, OutputStream

logger = logging.getLogger(__name__)


def format_header(token: str) -> str:
    """
    Build the header line for one input.

    Example:
        >>> format_header('notes.txt')
        '==> notes.txt <==\\n'
    """
    return f"==> {token} <==\n"


def emit_header(stdout: OutputStream, token: str, state: RunState) -> None:
    """Write the header for token, preceded by a blank line unless it is the first."""
    if not state.multiple_inputs:
        return
    separator = "" if state.first_header else "\n"
    stdout.write(separator + format_header(token))
    stdout.flush()
    state.first_header = False


def copy_lines(stream: InputStream, stdout: OutputStream, count: int) -> int:
    """
    Copy up to count lines, terminators included.

    Stops quietly when the input runs out first.

    Returns:
        Number of lines written
    """
    written = 0
    while written < count:
        try:
            line = stream.readline()
        except OSError as e:
            raise ReadError(stream.name, describe_os_error(e)) from e
        if not line:
            break
        stdout.write(line)
        stdout.flush()
        written += 1
    return written


def copy_bytes(stream: InputStream, stdout: OutputStream, count: int) -> int:
    """
    Copy up to count bytes, decoded leniently as UTF-8.

    A multibyte character cut by the limit (or any other invalid sequence)
    comes out as U+FFFD. No newline is appended.

    Returns:
        Number of bytes read from the input
    """
    try:
        data = stream.read_up_to(count)
    except OSError as e:
        raise ReadError(stream.name, describe_os_error(e)) from e
    stdout.write(data.decode('utf-8', errors='replace'))
    stdout.flush()
    return len(data)


def emit_input(stream: InputStream, stdout: OutputStream, invocation: Invocation) -> None:
    """Write the bounded content of one already opened input."""
    if invocation.byte_mode:
        n = copy_bytes(stream, stdout, invocation.byte_count)
        logger.debug("%s: copied %d bytes", stream.name, n)
    else:
        n = copy_lines(stream, stdout, invocation.line_count)
        logger.debug("%s: copied %d lines", stream.name, n)


def emit_all(
    invocation: Invocation,
    stdout: OutputStream,
    stderr: ErrorStream,
    stdin: Optional[BinaryIO] = None,
) -> int:
    """
    Run the per-input loop for a whole invocation.

    Args:
        invocation: Resolved options
        stdout: Destination for headers and content
        stderr: Destination for open failures
        stdin: Binary stream used for the "-" token

    Returns:
        Number of inputs that could not be opened

    Raises:
        ReadError: If reading an opened input fails
    """
    state = RunState.for_invocation(invocation)
    failed = 0

    for token in invocation.files:
        try:
            with open_input(token, stdin) as stream:
                emit_header(stdout, token, state)
                emit_input(stream, stdout, invocation)
        except OpenError as e:
            stderr.write(f"{e}\n")
            stderr.flush()
            failed += 1

    return failed
