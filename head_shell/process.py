"""Process class for running one command against a set of streams"""

from typing import Callable, List, Optional

from .exceptions import HeadError, InformationalExit, UsageError
from .streams import ErrorStream, InputStream, OutputStream


class Process:
    """Represents a single command invocation with its own streams"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdin: Optional[InputStream] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name, used as the prefix of fatal error messages
            args: Command arguments (without the command name)
            stdin: Input stream used for the "-" token
            stdout: Output stream
            stderr: Error stream
            executor: Callable that takes this process and returns an exit code
        """
        self.command = command
        self.args = args
        self.stdin = stdin or InputStream.from_bytes(b'')
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor

        self.exit_code = 0

    def execute(self) -> int:
        """
        Execute the process

        Errors raised by the command are reported on stderr and turned into
        the exit code they carry.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            self.stderr.write(f"Error: No such command '{self.command}'\n")
            self.exit_code = 127
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except (KeyboardInterrupt, BrokenPipeError):
            # Ctrl-C and a closed stdout are handled by the entry point
            raise
        except InformationalExit as e:
            self.exit_code = e.exit_code
        except UsageError as e:
            if e.usage:
                self.stderr.write(e.usage)
            self.stderr.write(f"{self.command}: {e}\n")
            self.exit_code = e.exit_code
        except HeadError as e:
            self.stderr.write(f"{self.command}: {e}\n")
            self.exit_code = e.exit_code
        except Exception as e:
            self.stderr.write(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = 1

        # Flush all streams
        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> bytes:
        """Get stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> bytes:
        """Get stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
