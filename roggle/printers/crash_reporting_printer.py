"""
Printer for crash-reporting services

Renders plain lines (suitable as breadcrumbs) and hands errors to a
reporting callback.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel
from roggle.printers.printer_config import PrinterConfig
from roggle.printers.single_pretty_printer import SinglePrettyPrinter
from roggle.printers.stack_trace import StackTrace


@dataclass(frozen=True)
class CrashReportEvent:
    """
    Error report produced for one log event.

    Attributes:
        error: The error object passed to the logger
        stack_trace: Explicit trace, or the traceback of the exception
        reason: Message text of the log event
        fatal: True for FATAL events
        level: Level of the log event
    """

    error: Any
    stack_trace: Optional[StackTrace]
    reason: str
    fatal: bool
    level: LogLevel


class CrashReportingPrinter(SinglePrettyPrinter):
    """
    Pretty printer that also reports errors.

    Colors, emoji and timestamps are off by default because crash-reporting
    services keep their own timestamps and show plain text.
    """

    def __init__(
        self,
        config: Optional[PrinterConfig] = None,
        error_level: LogLevel = LogLevel.ERROR,
        on_error: Optional[Callable[[CrashReportEvent], None]] = None,
        **overrides,
    ):
        """
        Initialize crash reporting printer.

        Args:
            config: Printer configuration (default: PrinterConfig.crash_reporting())
            error_level: Events at or above this level with an error are reported
            on_error: Callback receiving a CrashReportEvent
            **overrides: Any PrinterConfig field, applied over config

        Example:
            from roggle.writers import report_to_sentry

            printer = CrashReportingPrinter(on_error=report_to_sentry)
        """
        super().__init__(config or PrinterConfig.crash_reporting(), **overrides)
        self.error_level = error_level
        self.on_error = on_error

    def log(self, event: LogEvent) -> List[str]:
        lines = super().log(event)
        if self.should_report(event):
            self.on_error(self.build_report(event))
        return lines

    def should_report(self, event: LogEvent) -> bool:
        return (
            self.on_error is not None
            and event.error is not None
            and event.level >= self.error_level
        )

    def build_report(self, event: LogEvent) -> CrashReportEvent:
        stack_trace = None
        if event.stack_trace is not None:
            stack_trace = StackTrace.coerce(event.stack_trace)
        elif isinstance(event.error, BaseException) and event.error.__traceback__ is not None:
            stack_trace = StackTrace.from_exception(event.error)

        return CrashReportEvent(
            error=event.error,
            stack_trace=stack_trace,
            reason=event.message_text,
            fatal=event.level >= LogLevel.FATAL,
            level=event.level,
        )
