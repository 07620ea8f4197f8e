"""
Log printers module

Printers render log events into the lines handed to the output.
"""

from roggle.printers.ansi_color import AnsiColor
from roggle.printers.base_printer import BasePrinter
from roggle.printers.crash_reporting_printer import CrashReportEvent, CrashReportingPrinter
from roggle.printers.printer_config import PrinterConfig, format_time
from roggle.printers.simple_printer import SimplePrinter
from roggle.printers.single_pretty_printer import SinglePrettyPrinter
from roggle.printers.stack_trace import Frame, StackTrace

__all__ = [
    "AnsiColor",
    "BasePrinter",
    "CrashReportEvent",
    "CrashReportingPrinter",
    "Frame",
    "PrinterConfig",
    "SimplePrinter",
    "SinglePrettyPrinter",
    "StackTrace",
    "format_time",
]
