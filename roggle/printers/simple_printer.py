"""
Simple printer for minimal log output

Produces concise lines without caller resolution
"""

from typing import List

from roggle.core.log_event import LogEvent
from roggle.printers.base_printer import BasePrinter
from roggle.printers.printer_config import DEFAULT_LEVEL_COLORS
from roggle.printers.stack_trace import StackTrace


class SimplePrinter(BasePrinter):
    """
    Print events in a compact format.

    Cheaper than SinglePrettyPrinter because it never walks the call stack.
    """

    LEVEL_PREFIXES = {
        "TRACE": "[T]",
        "DEBUG": "[D]",
        "INFO": "[I]",
        "WARNING": "[W]",
        "ERROR": "[E]",
        "FATAL": "[F]",
    }

    def __init__(self, print_time: bool = False, colors: bool = True):
        """
        Initialize simple printer.

        Args:
            print_time: Include an ISO timestamp after the level
            colors: Color the level prefix

        Example:
            # Minimal format: "[I] message"
            printer = SimplePrinter(colors=False)

            # With timestamp: "[I] 2024-03-01T12:34:56.789000 message"
            printer = SimplePrinter(print_time=True)
        """
        self.print_time = print_time
        self.colors = colors

    def log(self, event: LogEvent) -> List[str]:
        prefix = self.LEVEL_PREFIXES.get(event.level.name, f"[{event.level.name[:1]}]")
        if self.colors:
            prefix = DEFAULT_LEVEL_COLORS[event.level](prefix)

        parts = [prefix]
        if self.print_time:
            parts.append(event.time.isoformat())
        parts.append(event.message_text)

        line = " ".join(parts)
        if event.error is not None:
            line += f"  ERROR: {event.error_text}"

        lines = [line]
        if event.stack_trace is not None:
            lines.extend(str(StackTrace.coerce(event.stack_trace)).splitlines())
        return lines

    def __repr__(self) -> str:
        return f"SimplePrinter(time={self.print_time}, colors={self.colors})"
