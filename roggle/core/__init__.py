"""
Core module for roggle

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEvent: Log event data structure
- LogLevel: Log level enumeration
- LoggerClosedError: Raised when logging through a closed logger
"""

from roggle.core.errors import LoggerClosedError
from roggle.core.log_event import LazyMessage, LogEvent
from roggle.core.log_level import LogLevel, get_default_level, set_default_level
from roggle.core.logger import Logger
from roggle.core.logger_builder import LoggerBuilder

__all__ = [
    "LazyMessage",
    "LogEvent",
    "LogLevel",
    "Logger",
    "LoggerBuilder",
    "LoggerClosedError",
    "get_default_level",
    "set_default_level",
]
