"""
Callback-based filter

Filters log events using custom callback functions
"""

from typing import Callable

from roggle.core.log_event import LogEvent
from roggle.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter log events using a custom callback function.

    Exceptions raised by the callback propagate to the log call.
    """

    def __init__(self, callback: Callable[[LogEvent], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes LogEvent and returns bool.
                     Should return True to log the event, False to discard it.

        Example:
            # Keep errors and anything mentioning a payment
            def payments_or_errors(event):
                return (event.level >= LogLevel.ERROR or
                        "payment" in event.message_text.lower())

            filter = CallbackFilter(payments_or_errors)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, event: LogEvent) -> bool:
        return bool(self.callback(event))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
