"""
Level-based filter

Filters log events based on a log level range
"""

from typing import Optional

from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel
from roggle.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log events based on log level.

    Allows filtering by minimum and/or maximum log level. Without a
    minimum, the filter's own level (or the process-wide default) applies.
    """

    def __init__(
        self,
        min_level: Optional[LogLevel] = None,
        max_level: Optional[LogLevel] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, the filter level.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Example:
            # Only log WARNING and above
            filter = LevelFilter(min_level=LogLevel.WARNING)

            # Only log DEBUG to INFO
            filter = LevelFilter(min_level=LogLevel.DEBUG, max_level=LogLevel.INFO)
        """
        self.min_level = min_level
        self.max_level = max_level

    def should_log(self, event: LogEvent) -> bool:
        """
        Check if event's level is within the specified range.

        Args:
            event: Log event to check

        Returns:
            True if event level is within range, False otherwise
        """
        minimum = self.min_level if self.min_level is not None else self.level
        if event.level < minimum:
            return False

        if self.max_level is not None and event.level > self.max_level:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
