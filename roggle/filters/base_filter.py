"""
Base filter interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel, get_default_level


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Filters determine whether a log event should be printed or discarded.
    A filter without a level of its own follows the process-wide default
    set with set_default_level().
    """

    _level: Optional[LogLevel] = None

    @property
    def level(self) -> LogLevel:
        """Threshold used by level-based filters."""
        return self._level if self._level is not None else get_default_level()

    @level.setter
    def level(self, value: Optional[LogLevel]) -> None:
        if value is not None and not isinstance(value, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self._level = value

    def init(self) -> None:
        """Called once when the owning logger is created."""

    @abstractmethod
    def should_log(self, event: LogEvent) -> bool:
        """
        Determine if a log event should be logged.

        Args:
            event: The log event to filter

        Returns:
            True if the event should be logged, False otherwise
        """
        pass

    def close(self) -> None:
        """Called once when the owning logger is closed."""

    def __call__(self, event: LogEvent) -> bool:
        """Allow filters to be callable."""
        return self.should_log(event)
