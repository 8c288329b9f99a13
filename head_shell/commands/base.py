"""
Base utilities for command implementations.

This module provides helpers shared by command modules so that they report
errors and parse arguments the same way.
"""

import argparse
import sys
from typing import Callable, Optional

from ..exceptions import InformationalExit, UsageError
from ..process import Process


class CommandArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser bound to a process.

    Help and version text go to the process stdout instead of sys.stdout, and
    instead of exiting the interpreter the parser raises:
    - UsageError for malformed command lines
    - InformationalExit after --help / --version

    Example:
        parser = CommandArgumentParser(process, description="...")
        parser.add_argument('files', nargs='*')
        args = parser.parse_args(process.args)
    """

    def __init__(self, process: Process, **kwargs):
        kwargs.setdefault('prog', process.command)
        super().__init__(**kwargs)
        self.process = process

    def _print_message(self, message, file=None):
        if not message:
            return
        if file is sys.stderr:
            self.process.stderr.write(message)
        else:
            self.process.stdout.write(message)

    def exit(self, status=0, message=None):
        if message:
            self.process.stderr.write(message)
        raise InformationalExit(status)

    def error(self, message):
        raise UsageError(message, usage=self.format_usage())


def count_type(unit: str) -> Callable[[str], int]:
    """
    Build an argparse type that accepts a plain decimal count.

    Only ASCII digits are accepted: no sign, whitespace, underscores or
    other scripts' digits.

    Args:
        unit: What is being counted, used in the error message

    Example:
        >>> count_type('lines')('5')
        5
    """
    def parse(text: str) -> int:
        if not (text.isascii() and text.isdigit()):
            raise argparse.ArgumentTypeError(f"invalid number of {unit}: {text!r}")
        return int(text)

    parse.__name__ = f"{unit}_count"
    return parse


def parse_command_args(parser: CommandArgumentParser, args: Optional[list] = None):
    """
    Parse args (defaults to the parser's process args).

    Options and positionals may be intermixed, e.g. ``head a.txt -n 3 b.txt``.
    """
    if args is None:
        args = parser.process.args
    return parser.parse_intermixed_args(args)


__all__ = [
    'CommandArgumentParser',
    'count_type',
    'parse_command_args',
]
