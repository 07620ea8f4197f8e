"""
Main Logger class

Every log call runs filter, printer and output synchronously before
returning.
"""

from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Any, Optional

from roggle.core.errors import LoggerClosedError
from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel, get_default_level, set_default_level
from roggle.filters.base_filter import BaseFilter
from roggle.filters.development_filter import DevelopmentFilter
from roggle.filters.production_filter import ProductionFilter
from roggle.printers.base_printer import BasePrinter
from roggle.printers.crash_reporting_printer import CrashReportingPrinter
from roggle.printers.single_pretty_printer import SinglePrettyPrinter
from roggle.printers.stack_trace import StackTrace
from roggle.writers.base_writer import BaseWriter, OutputEvent
from roggle.writers.console_writer import ConsoleWriter

logger = logging.getLogger(__name__)


class Logger:
    """
    Logger that filters, prints and writes events.

    Example:
        log = Logger(printer=SinglePrettyPrinter(logger_name="demo"))
        log.info("Application started")
        log.error("Request failed", error=exc)
        log.close()
    """

    get_default_level = staticmethod(get_default_level)
    set_default_level = staticmethod(set_default_level)

    def __init__(
        self,
        filter: Optional[BaseFilter] = None,
        printer: Optional[BasePrinter] = None,
        output: Optional[BaseWriter] = None,
        level: Optional[LogLevel] = None,
    ):
        """
        Create a logger and open its output.

        Args:
            filter: Event filter (default: DevelopmentFilter)
            printer: Event printer (default: SinglePrettyPrinter)
            output: Line writer (default: ConsoleWriter)
            level: Threshold assigned to the filter; None keeps the
                   filter's own level or the process-wide default
        """
        self._filter = filter if filter is not None else DevelopmentFilter()
        self._printer = printer if printer is not None else SinglePrettyPrinter()
        self._output = output if output is not None else ConsoleWriter()

        if level is not None:
            self._filter.level = level

        self._filter.init()
        self._printer.init()
        self._output.init()
        self._active = True

    @classmethod
    def crash_reporting(
        cls,
        printer: Optional[BasePrinter] = None,
        filter: Optional[BaseFilter] = None,
        output: Optional[BaseWriter] = None,
        level: Optional[LogLevel] = None,
    ) -> "Logger":
        """
        Create a logger tuned for crash-reporting services.

        Defaults to ProductionFilter and CrashReportingPrinter so the
        logger stays active in optimized runs.
        """
        return cls(
            filter=filter if filter is not None else ProductionFilter(),
            printer=printer if printer is not None else CrashReportingPrinter(),
            output=output if output is not None else ConsoleWriter(),
            level=level,
        )

    @property
    def filter(self) -> BaseFilter:
        return self._filter

    @property
    def printer(self) -> BasePrinter:
        return self._printer

    @property
    def output(self) -> BaseWriter:
        return self._output

    @property
    def active(self) -> bool:
        """False once close() has been called."""
        return self._active

    def log(
        self,
        level: LogLevel,
        message: Any,
        error: Any = None,
        stack_trace: Any = None,
    ) -> None:
        """
        Log a message.

        Args:
            level: Severity; must not be ALL or OFF
            message: Message object, or a zero-argument callable producing it
            error: Optional error object
            stack_trace: Optional StackTrace, traceback, exception or text trace

        Raises:
            ValueError: If level is a sentinel
            LoggerClosedError: If the logger has been closed
            TypeError: If error is a stack trace
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if level.is_sentinel:
            raise ValueError(f"Log events cannot have {level.name} level")
        if not self._active:
            raise LoggerClosedError()
        if isinstance(error, (StackTrace, TracebackType)):
            raise TypeError("error cannot be a stack trace; pass it as stack_trace")

        event = LogEvent(level=level, message=message, error=error, stack_trace=stack_trace)
        if not self._filter.should_log(event):
            return

        lines = self._printer.log(event)
        if lines:
            self._output.write(OutputEvent(event, lines))

    def trace(self, message: Any, error: Any = None, stack_trace: Any = None) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, error, stack_trace)

    def debug(self, message: Any, error: Any = None, stack_trace: Any = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, error, stack_trace)

    def info(self, message: Any, error: Any = None, stack_trace: Any = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, error, stack_trace)

    def warning(self, message: Any, error: Any = None, stack_trace: Any = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, message, error, stack_trace)

    def error(self, message: Any, error: Any = None, stack_trace: Any = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, error, stack_trace)

    def fatal(self, message: Any, error: Any = None, stack_trace: Any = None) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, message, error, stack_trace)

    verbose = trace
    warn = warning
    critical = fatal
    wtf = fatal

    def exception(self, message: Any, level: LogLevel = LogLevel.ERROR) -> None:
        """
        Log the exception currently being handled, with its traceback.

        Call from inside an except block.
        """
        _, exc, tb = sys.exc_info()
        self.log(level, message, exc, tb)

    def close(self) -> None:
        """Close the logger and its output. Closing twice is a no-op."""
        if not self._active:
            return
        self._active = False
        self._filter.close()
        self._printer.close()
        self._output.close()
        logger.debug("Closed %r", self)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "active" if self._active else "closed"
        return (
            f"Logger(filter={self._filter!r}, printer={self._printer!r}, "
            f"output={self._output!r}, {state})"
        )
