"""
Pytest configuration and shared fixtures for head-shell tests.

This module provides reusable test fixtures for:
- Captured output streams
- Temporary input files with known contents
- Running the head command in-process
"""

import io
import logging

import pytest

from head_shell.builtins import get_builtin
from head_shell.logging_config import LOGGER_NAME
from head_shell.process import Process
from head_shell.streams import ErrorStream, InputStream, OutputStream


TWELVE_LINES = b"".join(f"line {i}\n".encode() for i in range(1, 13))


# ============================================================================
# Stream doubles
# ============================================================================

class FailingReader(io.RawIOBase):
    """Binary source whose reads fail after an optional prefix."""

    def __init__(self, prefix: bytes = b'', errno: int = 5, message: str = 'Input/output error'):
        self._prefix = io.BytesIO(prefix)
        self.errno = errno
        self.message = message

    def readable(self):
        return True

    def read(self, size=-1):
        data = self._prefix.read(size)
        if data:
            return data
        raise OSError(self.errno, self.message)

    def readline(self, size=-1):
        data = self._prefix.readline(size)
        if data:
            return data
        raise OSError(self.errno, self.message)


class TrickleReader(io.RawIOBase):
    """Binary source that hands out at most one byte per read call."""

    def __init__(self, data: bytes):
        self._data = io.BytesIO(data)

    def readable(self):
        return True

    def read(self, size=-1):
        return self._data.read(1)


class RecordingReader(io.RawIOBase):
    """Binary source that remembers the size of every read request."""

    def __init__(self, data: bytes):
        self._data = io.BytesIO(data)
        self.requested = []

    def readable(self):
        return True

    def read(self, size=-1):
        self.requested.append(size)
        return self._data.read(size)


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides in-memory output streams.

    Returns:
        tuple: (stdout, stderr) streams backed by BytesIO

    Example:
        def test_output(capture_output):
            stdout, stderr = capture_output
            stdout.write('hi')
            assert stdout.get_value() == b'hi'
    """
    stdout = OutputStream(io.BytesIO())
    stderr = ErrorStream(io.BytesIO())
    return stdout, stderr


@pytest.fixture
def test_data_dir(tmp_path, monkeypatch):
    """
    Provides a temporary working directory with test data files.

    The current directory is switched to it so tests can use bare file names,
    which then appear verbatim in headers and error messages.

    Returns:
        pathlib.Path: Path to temporary test directory
    """
    (tmp_path / "three.txt").write_bytes(b"one\ntwo\nthree\n")
    (tmp_path / "twelve.txt").write_bytes(TWELVE_LINES)
    (tmp_path / "empty.txt").write_bytes(b"")
    (tmp_path / "no_newline.txt").write_bytes(b"alpha\nbeta")
    (tmp_path / "crlf.txt").write_bytes(b"a\r\nb\r\nc\r\n")
    (tmp_path / "emoji.txt").write_bytes("\U0001F600abc\n".encode('utf-8'))
    (tmp_path / "latin1.txt").write_bytes(b"caf\xe9\nna\xefve\n")
    (tmp_path / "subdir").mkdir()

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def run_head():
    """
    Provides a callable that runs head in-process.

    Returns:
        Callable[[list, bytes], Process]: runs head with args and stdin bytes
        and returns the finished process

    Example:
        def test_stdin(run_head):
            process = run_head([], stdin=b'a\\n')
            assert process.get_stdout() == b'a\\n'
    """
    def run(args, stdin=b'', stdin_stream=None):
        process = Process(
            command='head',
            args=[str(arg) for arg in args],
            stdin=stdin_stream or InputStream.from_bytes(stdin),
            stdout=OutputStream.to_buffer(),
            stderr=ErrorStream.to_buffer(),
            executor=get_builtin('head'),
        )
        process.execute()
        return process

    return run


@pytest.fixture
def reset_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(LOGGER_NAME)
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    level, handlers, propagate = saved
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


# ============================================================================
# Helper Functions
# ============================================================================

def get_stdout(process) -> str:
    """Get stdout content as string."""
    return process.get_stdout().decode('utf-8', errors='replace')


def get_stderr(process) -> str:
    """Get stderr content as string."""
    return process.get_stderr().decode('utf-8', errors='replace')


# Make helper functions available as pytest helpers
pytest.get_stdout = get_stdout
pytest.get_stderr = get_stderr
