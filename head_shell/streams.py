"""
Byte stream wrappers used by commands.

Commands never touch ``sys.stdin`` / ``sys.stdout`` directly. They read from an
InputStream and write to an OutputStream / ErrorStream, which lets the same
command run against the real process streams or against in-memory buffers.
"""

import io
import sys
from typing import BinaryIO, Optional, Union

STDIN_NAME = '-'
READ_CHUNK_SIZE = io.DEFAULT_BUFFER_SIZE


class InputStream:
    """
    Readable byte source bound to one input name.

    Two variants exist, selected by the constructor used:
    - from_stdin(): wraps the process standard input; close() leaves it open
    - from_path() / from_bytes(): owns its source and closes it

    Usage:
        with InputStream.from_path('notes.txt') as stream:
            first = stream.readline()
    """

    def __init__(self, source: BinaryIO, name: str = STDIN_NAME, owns_source: bool = True):
        self.source = source
        self.name = name
        self.owns_source = owns_source
        self._closed = False

    @classmethod
    def from_bytes(cls, data: bytes, name: str = STDIN_NAME) -> 'InputStream':
        """Create a stream over an in-memory byte string."""
        return cls(io.BytesIO(data), name=name)

    @classmethod
    def from_stdin(cls, stdin: Optional[BinaryIO] = None) -> 'InputStream':
        """
        Bind to standard input.

        Args:
            stdin: Binary stream to use instead of the process stdin
        """
        if stdin is None:
            stdin = getattr(sys.stdin, 'buffer', sys.stdin)
        return cls(stdin, name=STDIN_NAME, owns_source=False)

    @classmethod
    def from_path(cls, path: str) -> 'InputStream':
        """
        Open a file for binary reading.

        Raises:
            OSError: If the file cannot be opened
        """
        return cls(open(path, 'rb'), name=path)

    @property
    def closed(self) -> bool:
        return self._closed

    def read_up_to(self, size: int) -> bytes:
        """
        Read until size bytes have been collected or the source is exhausted.

        Pipes and terminals may return short reads, so this keeps reading
        until either limit is hit. Each call asks for at most READ_CHUNK_SIZE
        bytes, so a huge size never preallocates a huge buffer.
        """
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self.source.read(min(remaining, READ_CHUNK_SIZE))
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b''.join(chunks)

    def readline(self) -> bytes:
        """Read one line including its terminator; b'' at end of stream."""
        return self.source.readline()

    def close(self):
        if self._closed:
            return
        self._closed = True
        if self.owns_source:
            self.source.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self):
        return f"InputStream({self.name!r})"


class OutputStream:
    """
    Writable byte sink.

    Accepts both str and bytes; text is encoded as UTF-8 before it reaches
    the underlying buffer.
    """

    errors = 'surrogateescape'

    def __init__(self, buffer: Optional[BinaryIO] = None, encoding: str = 'utf-8'):
        self.buffer = buffer if buffer is not None else io.BytesIO()
        self.encoding = encoding

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream that collects everything in memory."""
        return cls(io.BytesIO())

    @classmethod
    def to_stdout(cls) -> 'OutputStream':
        return cls(getattr(sys.stdout, 'buffer', sys.stdout))

    def write(self, data: Union[str, bytes]) -> int:
        """
        Write text or bytes.

        Returns:
            Number of characters or bytes accepted
        """
        if isinstance(data, str):
            self.buffer.write(data.encode(self.encoding, self.errors))
        else:
            self.buffer.write(data)
        return len(data)

    def flush(self):
        self.buffer.flush()

    def get_value(self) -> bytes:
        """Return everything written so far (in-memory buffers only)."""
        if isinstance(self.buffer, io.BytesIO):
            return self.buffer.getvalue()
        return b''


class ErrorStream(OutputStream):
    """Diagnostic sink for per-input and fatal error messages."""

    @classmethod
    def to_stderr(cls) -> 'ErrorStream':
        return cls(getattr(sys.stderr, 'buffer', sys.stderr))
