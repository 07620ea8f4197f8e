"""
Pattern-based filter using regular expressions

Filters log events based on message content matching
"""

import re
from typing import Pattern, Union

from roggle.core.log_event import LogEvent
from roggle.filters.base_filter import BaseFilter


class PatternFilter(BaseFilter):
    """
    Filter log events based on regex pattern matching.

    Can be configured to include or exclude matching messages. Matching
    evaluates lazy messages; the printer then reuses the evaluated text.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, exclude matching messages. If False, include only matching messages.
            case_sensitive: Whether pattern matching is case-sensitive

        Example:
            # Only log messages containing "error"
            filter = PatternFilter(r"error")

            # Drop health check noise
            filter = PatternFilter(r"^GET /healthz", exclude=True)
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude

    def should_log(self, event: LogEvent) -> bool:
        matches = self.pattern.search(event.message_text) is not None
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode})"
