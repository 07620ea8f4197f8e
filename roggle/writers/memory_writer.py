"""In-memory writer"""

from collections import deque
from typing import Deque, List, Optional

from roggle.core.log_level import LogLevel
from roggle.writers.base_writer import BaseWriter, OutputEvent


class MemoryWriter(BaseWriter):
    """
    Keep the most recent events in memory.

    Useful in tests and for in-app log viewers. When buffer_size is set,
    the oldest events are evicted first. Events stay buffered after close();
    call clear() to drop them.
    """

    def __init__(self, buffer_size: Optional[int] = None):
        """
        Initialize memory writer.

        Args:
            buffer_size: Maximum number of events kept (None: unbounded)
        """
        if buffer_size is not None and buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._buffer: Deque[OutputEvent] = deque(maxlen=buffer_size)

    def write(self, output: OutputEvent) -> None:
        self._buffer.append(output)

    @property
    def events(self) -> List[OutputEvent]:
        return list(self._buffer)

    @property
    def lines(self) -> List[str]:
        """Every buffered line, oldest event first."""
        return [line for output in self._buffer for line in output.lines]

    def lines_at(self, level: LogLevel) -> List[str]:
        """Buffered lines of events at exactly this level."""
        return [
            line
            for output in self._buffer
            if output.level == level
            for line in output.lines
        ]

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)
