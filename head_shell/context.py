"""
Invocation and RunState - options and transient state for one head run.

Invocation holds what the command line resolved to. RunState holds the two
flags threaded through the per-input loop. Neither outlives one run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .streams import STDIN_NAME

DEFAULT_LINES = 10


@dataclass
class Invocation:
    """
    Resolved options for one run.

    When ``byte_count`` is set the run is in byte mode and ``line_count`` is
    ignored entirely.

    Example:
        >>> inv = Invocation(files=['a.txt', 'b.txt'], byte_count=5)
        >>> inv.multiple_inputs
        True
        >>> inv.byte_mode
        True
    """

    files: List[str] = field(default_factory=lambda: [STDIN_NAME])
    line_count: int = DEFAULT_LINES
    byte_count: Optional[int] = None

    def __post_init__(self):
        if not self.files:
            self.files = [STDIN_NAME]
        if self.line_count < 0:
            raise ValueError(f"line count must not be negative: {self.line_count}")
        if self.byte_count is not None and self.byte_count < 0:
            raise ValueError(f"byte count must not be negative: {self.byte_count}")

    @property
    def byte_mode(self) -> bool:
        return self.byte_count is not None

    @property
    def multiple_inputs(self) -> bool:
        """True when every opened input gets a header."""
        return len(self.files) > 1


@dataclass
class RunState:
    """
    Per-run flags used by the emitter.

    ``multiple_inputs`` is fixed at creation. ``first_header`` flips to False
    the first time a header is written, so only later headers get a blank
    separator line. Failed opens never touch it.
    """

    multiple_inputs: bool
    first_header: bool = True

    @classmethod
    def for_invocation(cls, invocation: Invocation) -> 'RunState':
        return cls(multiple_inputs=invocation.multiple_inputs)
