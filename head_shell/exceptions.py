"""
Exception hierarchy for head-shell.

This module defines the errors raised while running the head command:
- Per-input errors carry the offending token and the OS level cause
- Each error knows the exit code it maps to
- Usage and informational exits replace argparse's SystemExit

Usage:
    from head_shell.exceptions import OpenError, ReadError

    try:
        stream = resolve_input(token)
    except OpenError as e:
        stderr.write(f"{e}\n")
"""

from typing import Optional


class HeadError(Exception):
    """
    Base class for all head-shell errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Input Errors
# =============================================================================

class InputError(HeadError):
    """
    Base class for errors bound to one input token.

    The message always has the form ``<path>: <cause>``.
    """

    def __init__(self, path: str, cause: str, exit_code: int = 1):
        super().__init__(f"{path}: {cause}", exit_code)
        self.path = path
        self.cause = cause


class OpenError(InputError):
    """
    Raised when an input token cannot be opened.

    The emitter reports it and moves on to the next token.

    Example:
        raise OpenError("missing.txt", "No such file or directory")
    """


class ReadError(InputError):
    """
    Raised when reading an already opened input fails.

    Fatal for the whole run.
    """


# =============================================================================
# Command Errors
# =============================================================================

class UsageError(HeadError):
    """
    Raised when the command line cannot be parsed.

    Example:
        raise UsageError("argument -c/--bytes: not allowed with argument -n/--lines")
    """

    def __init__(self, details: str, usage: Optional[str] = None):
        super().__init__(details, exit_code=2)
        self.usage = usage


class InformationalExit(HeadError):
    """Raised once --help or --version output has been written."""

    def __init__(self, exit_code: int = 0):
        super().__init__("", exit_code)


# =============================================================================
# Utility Functions
# =============================================================================

def describe_os_error(error: Exception) -> str:
    """
    Return the short user facing text for an OS error.

    Args:
        error: The exception raised by an open or read call

    Returns:
        The ``strerror`` text when present, otherwise ``str(error)``

    Example:
        >>> describe_os_error(FileNotFoundError(2, 'No such file or directory'))
        'No such file or directory'
    """
    strerror = getattr(error, 'strerror', None)
    if strerror:
        return strerror
    return str(error)
