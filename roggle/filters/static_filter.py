"""
Filters with a fixed answer
"""

from roggle.core.log_event import LogEvent
from roggle.filters.base_filter import BaseFilter


class AllowAllFilter(BaseFilter):
    """Log every event regardless of level."""

    def should_log(self, event: LogEvent) -> bool:
        return True

    def __repr__(self) -> str:
        return "AllowAllFilter()"


class DenyAllFilter(BaseFilter):
    """Discard every event regardless of level."""

    def should_log(self, event: LogEvent) -> bool:
        return False

    def __repr__(self) -> str:
        return "DenyAllFilter()"
