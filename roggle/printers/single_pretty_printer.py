"""
Single-line pretty printer

Output looks like this::

    💡 [INFO]    06:46:15.354 main (/app/main.py:16:5): Log message
"""

import dataclasses
import os
from datetime import datetime
from typing import List, Optional

from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel
from roggle.printers.ansi_color import AnsiColor
from roggle.printers.base_printer import BasePrinter
from roggle.printers.printer_config import PrinterConfig, format_time
from roggle.printers.stack_trace import (
    LIBRARY_PACKAGE,
    LIBRARY_PATH,
    RESERVED_PREFIX,
    Frame,
    StackTrace,
)


class SinglePrettyPrinter(BasePrinter):
    """
    Print each event as one decorated line.

    Every line of an event (message, error, stack trace) carries the same
    prefix of emoji, logger name, label, time and caller.
    """

    # Frames whose text contains this path belong to this library.
    self_path = LIBRARY_PATH + os.sep

    format_time = staticmethod(format_time)

    def __init__(self, config: Optional[PrinterConfig] = None, **overrides):
        """
        Initialize pretty printer.

        Args:
            config: Printer configuration (default: PrinterConfig.default())
            **overrides: Any PrinterConfig field, applied over config

        Example:
            printer = SinglePrettyPrinter(logger_name="demo", print_time=False)
        """
        if config is None:
            config = PrinterConfig(**overrides)
        elif overrides:
            config = dataclasses.replace(config, **overrides)
        self.config = config

    def log(self, event: LogEvent) -> List[str]:
        stack_trace_lines = None
        if event.stack_trace is not None:
            # An explicit stack trace is always shown.
            stack_trace_lines = self.get_stack_trace(StackTrace.coerce(event.stack_trace))
        elif event.level >= self.config.stack_trace_level:
            stack_trace_lines = self.get_stack_trace()

        return self._format_message(
            level=event.level,
            message=event.message_text,
            error=event.error_text,
            stack_trace=stack_trace_lines,
            time=event.time,
        )

    def discard_frame(self, frame: Frame) -> bool:
        """True for runtime frames and frames of this library."""
        return (
            frame.is_core
            or frame.package == LIBRARY_PACKAGE
            or frame.uri.startswith(RESERVED_PREFIX)
            or self.self_path in str(frame)
        )

    def user_frames(self, stack_trace: StackTrace) -> List[Frame]:
        return [frame for frame in stack_trace if not self.discard_frame(frame)]

    def format_frame(self, frame: Frame) -> str:
        return frame.format(
            show_member=self.config.print_function_name,
            show_location=self.config.print_location,
        )

    def get_caller(self, stack_trace: Optional[StackTrace] = None) -> Optional[str]:
        """
        Render the first user frame, or None when there is none.

        Args:
            stack_trace: Trace to search (default: the current call stack)
        """
        if stack_trace is None:
            stack_trace = StackTrace.current()
        for frame in stack_trace:
            if self.discard_frame(frame):
                continue
            return self.format_frame(frame) or None
        return None

    def get_stack_trace(self, stack_trace: Optional[StackTrace] = None) -> List[str]:
        """
        Render user frames as numbered trace lines.

        At most stack_trace_method_count frames are kept.
        """
        if stack_trace is None:
            stack_trace = StackTrace.current()
        limit = self.config.stack_trace_method_count
        formatted = []
        for frame in self.user_frames(stack_trace):
            if limit is not None and len(formatted) >= limit:
                break
            count = str(len(formatted)).ljust(7)
            formatted.append(f"{self.config.stack_trace_prefix}#{count}{self.format_frame(frame)}")
        return formatted

    def get_level_color(self, level: LogLevel) -> AnsiColor:
        if not self.config.colors:
            return AnsiColor.none()
        return self.config.level_colors.get(level, AnsiColor.none())

    def format_fixed(self, level: LogLevel, time: Optional[datetime] = None) -> str:
        """Build the prefix shared by every line of one event."""
        config = self.config
        buffer = []

        if config.print_emojis:
            buffer.append(config.level_emojis[level])
        if config.logger_name is not None:
            buffer.append(config.logger_name)
        if config.print_labels:
            buffer.append(config.level_labels[level])
        if config.print_time:
            buffer.append(config.time_formatter(time or datetime.now()))
        if config.print_caller:
            caller = self.get_caller()
            if caller is not None:
                buffer.append(caller)

        return f"{' '.join(buffer)}: " if buffer else ""

    def _format_message(
        self,
        level: LogLevel,
        message: str,
        error: Optional[str] = None,
        stack_trace: Optional[List[str]] = None,
        time: Optional[datetime] = None,
    ) -> List[str]:
        color = self.get_level_color(level)
        fixed = self.format_fixed(level, time)
        logs = [color(f"{fixed}{message}")]

        if error is not None:
            logs.append(color(f"{fixed}{self.config.stack_trace_prefix} {error}"))

        for line in stack_trace or ():
            logs.append(color(f"{fixed}{line}"))
        return logs

    def __repr__(self) -> str:
        return f"SinglePrettyPrinter(logger_name={self.config.logger_name!r})"
