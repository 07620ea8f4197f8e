"""
Log event data structure

One LogEvent is created per log call and consumed synchronously by the
filter, the printer and the output.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from roggle.core.log_level import LogLevel

_UNSET = object()


def stringify_message(message: Any) -> str:
    """
    Convert an already-evaluated message to display text.

    None renders as an empty string, dicts and lists as JSON,
    everything else through str().
    """
    if message is None:
        return ""
    if isinstance(message, str):
        return message
    if isinstance(message, (dict, list)):
        return json.dumps(message, default=str, ensure_ascii=False)
    return str(message)


class LazyMessage:
    """
    Deferred message evaluated at most once.

    A zero-argument callable is invoked the first time the value is
    needed; any other object is its own value.
    """

    __slots__ = ("_source", "_value")

    def __init__(self, source: Any):
        self._source = source
        self._value = _UNSET

    @property
    def evaluated(self) -> bool:
        return self._value is not _UNSET

    def value(self) -> Any:
        """Evaluate (once) and return the underlying message object."""
        if self._value is _UNSET:
            self._value = self._source() if callable(self._source) else self._source
        return self._value

    def text(self) -> str:
        """Evaluate (once) and return the message as display text."""
        return stringify_message(self.value())

    def __repr__(self) -> str:
        state = "evaluated" if self.evaluated else "pending"
        return f"LazyMessage({self._source!r}, {state})"


@dataclass(frozen=True)
class LogEvent:
    """
    Log event data structure.

    Attributes:
        level: Real (non-sentinel) severity of the event
        message: Message exactly as passed to the logger; may be a
                 zero-argument callable
        error: Optional error object (usually an exception)
        stack_trace: Optional stack trace captured by the caller
        time: Creation time of the event
    """

    level: LogLevel
    message: Any = None
    error: Any = None
    stack_trace: Optional[Any] = None
    time: datetime = field(default_factory=datetime.now)
    _lazy: LazyMessage = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        object.__setattr__(self, "_lazy", LazyMessage(self.message))

    @property
    def message_text(self) -> str:
        """Message as text, evaluating a lazy message on first access."""
        return self._lazy.text()

    @property
    def message_evaluated(self) -> bool:
        return self._lazy.evaluated

    @property
    def error_text(self) -> Optional[str]:
        return None if self.error is None else str(self.error)

    def to_dict(self) -> dict:
        """
        Convert log event to dictionary.

        Evaluates a lazy message.
        """
        return {
            "level": self.level.name,
            "message": self.message_text,
            "error": self.error_text,
            "time": self.time.isoformat(),
        }
