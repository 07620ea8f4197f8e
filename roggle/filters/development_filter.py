"""
Threshold filter that is only active in debug runs
"""

from typing import Optional

from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel
from roggle.filters.base_filter import BaseFilter


class DevelopmentFilter(BaseFilter):
    """
    Log events at or above the filter's level while __debug__ is set.

    Running Python with -O turns every event off, which keeps development
    logging out of optimized deployments.
    """

    def __init__(self, level: Optional[LogLevel] = None):
        self.level = level

    def should_log(self, event: LogEvent) -> bool:
        if not __debug__:
            return False
        return event.level >= self.level

    def __repr__(self) -> str:
        return f"DevelopmentFilter(level={self.level})"
