"""
HEAD command - output the first part of files.
"""

import argparse

from .. import __version__
from ..context import DEFAULT_LINES, Invocation
from ..emitter import emit_all
from ..process import Process
from . import register_command
from .base import CommandArgumentParser, count_type, parse_command_args

DESCRIPTION = """\
Print the first 10 lines of each FILE to standard output.
With more than 1 FILE, precede each with a header giving the file name."""


def build_parser(process: Process) -> CommandArgumentParser:
    """Build the argument parser for head, bound to process."""
    parser = CommandArgumentParser(
        process,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'files',
        nargs='*',
        metavar='FILE',
        help='File(s) to read (default: standard input)',
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '-n', '--lines',
        type=count_type('lines'),
        metavar='LINES',
        help=f'Print the first LINES number of lines (default: {DEFAULT_LINES})',
    )
    mode.add_argument(
        '-c', '--bytes',
        type=count_type('bytes'),
        metavar='BYTES',
        help='Print the first BYTES number of bytes',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    return parser


def parse_invocation(process: Process) -> Invocation:
    """
    Turn the process arguments into an Invocation.

    Raises:
        UsageError: If the arguments are malformed or --lines and --bytes are combined
        InformationalExit: After --help or --version output
    """
    args = parse_command_args(build_parser(process))
    return Invocation(
        files=list(args.files or []),
        line_count=DEFAULT_LINES if args.lines is None else args.lines,
        byte_count=args.bytes,
    )


@register_command('head')
def cmd_head(process: Process) -> int:
    """
    Output the first part of files

    Usage: head [-n LINES | -c BYTES] [FILE...]

    Files that cannot be opened are reported and skipped; they do not change
    the exit code. A read failure ends the command.
    """
    invocation = parse_invocation(process)
    emit_all(invocation, process.stdout, process.stderr, stdin=process.stdin.source)
    return 0
