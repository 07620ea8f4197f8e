"""Writers module - Log output handlers"""

from roggle.writers.base_writer import BaseWriter, OutputEvent
from roggle.writers.console_writer import ConsoleWriter
from roggle.writers.memory_writer import MemoryWriter
from roggle.writers.multi_writer import MultiWriter
from roggle.writers.sentry_writer import SentryWriter, init_sentry, report_to_sentry

__all__ = [
    "BaseWriter",
    "ConsoleWriter",
    "MemoryWriter",
    "MultiWriter",
    "OutputEvent",
    "SentryWriter",
    "init_sentry",
    "report_to_sentry",
]
