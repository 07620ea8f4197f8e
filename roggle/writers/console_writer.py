"""Console writer"""

import sys
from typing import Optional, TextIO

from roggle.writers.base_writer import BaseWriter, OutputEvent


class ConsoleWriter(BaseWriter):
    """Write log lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout at write time)
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, output: OutputEvent) -> None:
        """Write every line of the event, then flush."""
        stream = self.stream
        for line in output.lines:
            stream.write(line + "\n")
        stream.flush()
