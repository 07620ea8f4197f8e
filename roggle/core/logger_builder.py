"""Logger builder pattern"""

import dataclasses
from typing import List, Optional

from roggle.core.log_level import LogLevel
from roggle.core.logger import Logger
from roggle.filters.base_filter import BaseFilter
from roggle.printers.base_printer import BasePrinter
from roggle.printers.printer_config import PrinterConfig
from roggle.printers.single_pretty_printer import SinglePrettyPrinter
from roggle.writers.base_writer import BaseWriter
from roggle.writers.console_writer import ConsoleWriter
from roggle.writers.multi_writer import MultiWriter
from roggle.writers.sentry_writer import SentryWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = PrinterConfig()
        self._level: Optional[LogLevel] = None
        self._filter: Optional[BaseFilter] = None
        self._printer: Optional[BasePrinter] = None
        self._console_enabled = False
        self._console_stream = None
        self._writers: List[BaseWriter] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name shown in every line."""
        self._config = dataclasses.replace(self._config, logger_name=name)
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._level = level
        return self

    def with_filter(self, log_filter: BaseFilter) -> "LoggerBuilder":
        """
        Set the log filter.

        Args:
            log_filter: Filter instance (BaseFilter subclass)

        Returns:
            Self for method chaining

        Example:
            from roggle.filters import ProductionFilter

            logger = (LoggerBuilder()
                .with_filter(ProductionFilter())
                .with_level(LogLevel.WARNING)
                .build())
        """
        self._filter = log_filter
        return self

    def with_printer(self, printer: BasePrinter) -> "LoggerBuilder":
        """Use a ready-made printer; printer settings on this builder are ignored."""
        self._printer = printer
        return self

    def with_printer_config(self, config: Optional[PrinterConfig] = None, **overrides) -> "LoggerBuilder":
        """
        Configure the default pretty printer.

        Args:
            config: Base configuration (default: the current one)
            **overrides: Any PrinterConfig field

        Example:
            logger = (LoggerBuilder()
                .with_printer_config(print_time=False, stack_trace_method_count=5)
                .build())
        """
        self._config = dataclasses.replace(config or self._config, **overrides)
        return self

    def with_console(self, colored: bool = True, stream=None) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._console_stream = stream
        self._config = dataclasses.replace(self._config, colors=colored)
        return self

    def with_sentry(
        self,
        dsn: Optional[str] = None,
        environment: Optional[str] = None,
        category: str = "roggle",
    ) -> "LoggerBuilder":
        """
        Record log lines as Sentry breadcrumbs.

        Args:
            dsn: If given, initialize the Sentry SDK with this DSN
            environment: Environment name passed to the SDK
            category: Breadcrumb category

        Returns:
            Self for method chaining
        """
        self._writers.append(SentryWriter(category=category, dsn=dsn, environment=environment))
        return self

    def add_writer(self, writer: BaseWriter) -> "LoggerBuilder":
        """
        Add a custom writer.

        Args:
            writer: Writer instance

        Returns:
            Self for method chaining
        """
        self._writers.append(writer)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        writers: List[BaseWriter] = []

        if self._console_enabled:
            writers.append(ConsoleWriter(stream=self._console_stream))
        writers.extend(self._writers)

        if not writers:
            output = None
        elif len(writers) == 1:
            output = writers[0]
        else:
            output = MultiWriter(writers)

        printer = self._printer or SinglePrettyPrinter(self._config)
        return Logger(filter=self._filter, printer=printer, output=output, level=self._level)
