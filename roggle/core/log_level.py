"""
Log level enumeration and the process-wide default threshold
"""

from enum import IntEnum
from typing import List


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module.
    ALL and OFF are thresholds only; an event can never carry them.
    """

    ALL = 0         # Threshold: log everything
    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARNING = 30    # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Unrecoverable failures
    OFF = 100       # Threshold: log nothing

    # Aliases
    VERBOSE = 5
    WARN = 30
    CRITICAL = 50
    WTF = 50
    NOTHING = 100

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def is_sentinel(self) -> bool:
        """True for ALL and OFF, which are valid only as thresholds."""
        return self in (LogLevel.ALL, LogLevel.OFF)

    @classmethod
    def real_levels(cls) -> List["LogLevel"]:
        """Every level an event may carry, most verbose first."""
        return [level for level in cls if not level.is_sentinel]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or alias (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogLevel":
        """
        Map a stdlib logging level number to the closest real level.

        Numbers between two levels round down; anything below TRACE maps to
        TRACE and anything above FATAL maps to FATAL.
        """
        result = LogLevel.TRACE
        for level in cls.real_levels():
            if levelno >= level:
                result = level
        return result


# Process-wide threshold read by filters that have no level of their own.
# Plain module state: last writer wins and readers get no atomicity
# guarantee, so change it from one thread or under external locking.
_default_level: LogLevel = LogLevel.TRACE


def get_default_level() -> LogLevel:
    """Return the process-wide default threshold."""
    return _default_level


def set_default_level(level: LogLevel) -> None:
    """
    Replace the process-wide default threshold.

    Args:
        level: Any LogLevel, sentinels included (OFF silences every
               filter that relies on the default)
    """
    global _default_level
    if not isinstance(level, LogLevel):
        raise TypeError("level must be LogLevel enum")
    _default_level = level
