"""
Base writer interface

A writer receives the lines of one event and sends them to their
destination in order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from roggle.core.log_event import LogEvent


@dataclass(frozen=True)
class OutputEvent:
    """Rendered lines of one log event."""

    event: LogEvent
    lines: List[str]

    @property
    def level(self):
        return self.event.level


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    Writers must not reorder or drop lines. Errors raised while writing are
    the writer's own concern and propagate to the log call.
    """

    def init(self) -> None:
        """Open the destination. Called once by the owning logger."""

    @abstractmethod
    def write(self, output: OutputEvent) -> None:
        """
        Write the lines of one event.

        Args:
            output: Event and its rendered lines
        """
        pass

    def close(self) -> None:
        """Release the destination. Called once by the owning logger."""

    def __call__(self, output: OutputEvent) -> None:
        """Allow writers to be callable."""
        self.write(output)
