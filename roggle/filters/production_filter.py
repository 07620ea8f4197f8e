"""
Threshold filter used in production builds
"""

from typing import Optional

from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel
from roggle.filters.base_filter import BaseFilter


class ProductionFilter(BaseFilter):
    """
    Log every event at or above the filter's level.

    Example:
        filter = ProductionFilter(level=LogLevel.WARNING)
    """

    def __init__(self, level: Optional[LogLevel] = None):
        self.level = level

    def should_log(self, event: LogEvent) -> bool:
        return event.level >= self.level

    def __repr__(self) -> str:
        return f"ProductionFilter(level={self.level})"
