"""Command line entry point: run head against the real process streams."""

import os
import sys
from typing import List, Optional

from .builtins import get_builtin
from .logging_config import LOG_LEVEL_ENV, setup_logger
from .process import Process
from .streams import ErrorStream, InputStream, OutputStream

COMMAND_NAME = 'head'


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run head with argv (defaults to sys.argv[1:]).

    Returns:
        The exit code of the command
    """
    if argv is None:
        argv = sys.argv[1:]

    setup_logger(os.environ.get(LOG_LEVEL_ENV))

    process = Process(
        command=COMMAND_NAME,
        args=argv,
        stdin=InputStream.from_stdin(),
        stdout=OutputStream.to_stdout(),
        stderr=ErrorStream.to_stderr(),
        executor=get_builtin(COMMAND_NAME),
    )
    return process.execute()


def run():
    try:
        exit_code = main()
    except BrokenPipeError:
        # Reader went away (e.g. piped into another head); silence the
        # flush Python attempts on shutdown.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        exit_code = 1
    sys.exit(exit_code)


if __name__ == '__main__':
    run()
