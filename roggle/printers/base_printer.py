"""
Base printer interface
"""

from abc import ABC, abstractmethod
from typing import List

from roggle.core.log_event import LogEvent


class BasePrinter(ABC):
    """
    Abstract base class for log printers.

    Printers turn one LogEvent into the ordered lines handed to the output.
    """

    def init(self) -> None:
        """Called once when the owning logger is created."""

    @abstractmethod
    def log(self, event: LogEvent) -> List[str]:
        """
        Render a log event.

        Args:
            event: The log event to render

        Returns:
            Lines to write, in order; may be empty
        """
        pass

    def close(self) -> None:
        """Called once when the owning logger is closed."""

    def __call__(self, event: LogEvent) -> List[str]:
        """Allow printers to be callable."""
        return self.log(event)
