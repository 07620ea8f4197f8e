"""Basic tests for the logger"""

import io
import logging
import random
from unittest.mock import patch

import pytest

from roggle import LoggerBuilder, LogLevel, Logger, LoggerClosedError
from roggle.core.log_event import LogEvent
from roggle.core.log_level import get_default_level, set_default_level
from roggle.filters import AllowAllFilter, DenyAllFilter, DevelopmentFilter, ProductionFilter
from roggle.printers import CrashReportingPrinter, SinglePrettyPrinter, StackTrace
from roggle.printers.base_printer import BasePrinter
from roggle.writers import ConsoleWriter, MemoryWriter, MultiWriter, SentryWriter


class RecordingPrinter(BasePrinter):
    """Printer that remembers every event it is asked to render."""

    def __init__(self, lines=None):
        self.events = []
        self.lines = lines

    def log(self, event):
        self.events.append(event)
        if self.lines is None:
            return []
        return list(self.lines)

    @property
    def last(self):
        return self.events[-1] if self.events else None


class ClosingWriter(MemoryWriter):
    """Memory writer counting close() calls."""

    def __init__(self):
        super().__init__()
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


@pytest.fixture(autouse=True)
def restore_default_level():
    level = get_default_level()
    yield
    set_default_level(level)


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.ALL < LogLevel.TRACE
        assert LogLevel.TRACE < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL
        assert LogLevel.FATAL < LogLevel.OFF

    def test_aliases(self):
        assert LogLevel.VERBOSE is LogLevel.TRACE
        assert LogLevel.WARN is LogLevel.WARNING
        assert LogLevel.WTF is LogLevel.FATAL
        assert LogLevel.CRITICAL is LogLevel.FATAL
        assert LogLevel.NOTHING is LogLevel.OFF

    def test_sentinels(self):
        assert LogLevel.ALL.is_sentinel
        assert LogLevel.OFF.is_sentinel
        assert not LogLevel.INFO.is_sentinel

    def test_real_levels(self):
        assert LogLevel.real_levels() == [
            LogLevel.TRACE,
            LogLevel.DEBUG,
            LogLevel.INFO,
            LogLevel.WARNING,
            LogLevel.ERROR,
            LogLevel.FATAL,
        ]

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("wtf") == LogLevel.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("loud")

    def test_from_logging_level(self):
        assert LogLevel.from_logging_level(logging.DEBUG) == LogLevel.DEBUG
        assert LogLevel.from_logging_level(logging.WARNING) == LogLevel.WARNING
        assert LogLevel.from_logging_level(logging.CRITICAL) == LogLevel.FATAL
        assert LogLevel.from_logging_level(25) == LogLevel.INFO
        assert LogLevel.from_logging_level(1) == LogLevel.TRACE
        assert LogLevel.from_logging_level(99) == LogLevel.FATAL

    def test_default_level(self):
        assert get_default_level() == LogLevel.TRACE
        set_default_level(LogLevel.ERROR)
        assert Logger.get_default_level() == LogLevel.ERROR

    def test_default_level_rejects_non_levels(self):
        with pytest.raises(TypeError):
            set_default_level(30)


class TestLogEvent:
    """Test log event structure."""

    def test_create_event(self):
        event = LogEvent(level=LogLevel.INFO, message="Test message")
        assert event.level == LogLevel.INFO
        assert event.message == "Test message"
        assert event.message_text == "Test message"
        assert event.error is None
        assert event.stack_trace is None

    def test_level_must_be_enum(self):
        with pytest.raises(TypeError):
            LogEvent(level=20, message="Test")

    def test_lazy_message_evaluated_once(self):
        calls = []

        def build():
            calls.append(1)
            return "expensive"

        event = LogEvent(level=LogLevel.DEBUG, message=build)
        assert not event.message_evaluated
        assert event.message_text == "expensive"
        assert event.message_text == "expensive"
        assert calls == [1]

    def test_none_message_is_empty(self):
        event = LogEvent(level=LogLevel.INFO, message=None)
        assert event.message_text == ""

    def test_structured_message_is_json(self):
        event = LogEvent(level=LogLevel.INFO, message={"user": "ann", "ok": True})
        assert event.message_text == '{"user": "ann", "ok": true}'

    def test_to_dict(self):
        event = LogEvent(level=LogLevel.DEBUG, message="Test", error=ValueError("bad"))
        data = event.to_dict()
        assert data["level"] == "DEBUG"
        assert data["message"] == "Test"
        assert data["error"] == "bad"


class TestLogger:
    """Test main logger functionality."""

    def test_create_logger(self):
        logger = Logger(output=MemoryWriter())
        assert isinstance(logger.filter, DevelopmentFilter)
        assert isinstance(logger.printer, SinglePrettyPrinter)
        assert logger.active
        logger.close()

    def test_default_output_is_console(self):
        logger = Logger()
        assert isinstance(logger.output, ConsoleWriter)
        logger.close()

    def test_getters_return_given_parts(self):
        log_filter = ProductionFilter()
        printer = SinglePrettyPrinter()
        output = MemoryWriter()
        logger = Logger(filter=log_filter, printer=printer, output=output)

        assert logger.filter is log_filter
        assert logger.printer is printer
        assert logger.output is output

    def test_log_every_real_level(self):
        printer = RecordingPrinter()
        logger = Logger(filter=AllowAllFilter(), printer=printer, output=MemoryWriter())

        for level in LogLevel.real_levels():
            message = str(random.randint(0, 999999999))
            logger.log(level, message)
            assert printer.last.level == level
            assert printer.last.message == message
            assert printer.last.error is None
            assert printer.last.stack_trace is None

            logger.log(level, None)
            assert printer.last.level == level
            assert printer.last.message is None
            assert printer.last.error is None

            message = str(random.randint(0, 999999999))
            logger.log(level, message, "MyError")
            assert printer.last.message == message
            assert printer.last.error == "MyError"
            assert printer.last.stack_trace is None

            message = str(random.randint(0, 999999999))
            stack_trace = StackTrace.current()
            logger.log(level, message, "MyError", stack_trace)
            assert printer.last.message == message
            assert printer.last.error == "MyError"
            assert printer.last.stack_trace is stack_trace

    def test_sink_receives_rendered_lines(self):
        output = MemoryWriter()
        logger = Logger(
            filter=AllowAllFilter(),
            printer=RecordingPrinter(lines=["first", "second"]),
            output=output,
        )

        logger.warning("Test")

        assert len(output) == 1
        assert output.events[0].event.level == LogLevel.WARNING
        assert output.lines == ["first", "second"]

    def test_empty_render_skips_sink(self):
        output = MemoryWriter()
        logger = Logger(filter=AllowAllFilter(), printer=RecordingPrinter(lines=[]), output=output)

        logger.info("Test")

        assert len(output) == 0

    def test_deny_all_filter_skips_printer_and_sink(self):
        printer = RecordingPrinter(lines=["line"])
        output = MemoryWriter()
        logger = Logger(filter=DenyAllFilter(), printer=printer, output=output)

        for level in LogLevel.real_levels():
            logger.log(level, "Some message")

        assert printer.events == []
        assert len(output) == 0

    def test_lazy_message_not_evaluated_when_filtered(self):
        calls = []
        logger = Logger(filter=DenyAllFilter(), printer=RecordingPrinter(), output=MemoryWriter())

        logger.debug(lambda: calls.append(1) or "expensive")

        assert calls == []

    def test_lazy_message_evaluated_once_when_logged(self):
        calls = []
        output = MemoryWriter()
        logger = Logger(
            filter=AllowAllFilter(),
            printer=SinglePrettyPrinter(print_caller=False, print_time=False, colors=False),
            output=output,
        )

        logger.info(lambda: calls.append(1) or "expensive")

        assert calls == [1]
        assert output.lines[0].endswith("expensive")

    @pytest.mark.parametrize("level", [LogLevel.ALL, LogLevel.OFF])
    def test_sentinel_level_raises(self, level):
        logger = Logger(filter=AllowAllFilter(), printer=RecordingPrinter(), output=MemoryWriter())
        with pytest.raises(ValueError):
            logger.log(level, "Test")

    def test_sentinel_level_raises_with_deny_all_filter(self):
        logger = Logger(filter=DenyAllFilter(), printer=RecordingPrinter(), output=MemoryWriter())
        with pytest.raises(ValueError):
            logger.log(LogLevel.OFF, "Test")

    def test_stack_trace_as_error_raises(self):
        logger = Logger(filter=AllowAllFilter(), printer=RecordingPrinter(), output=MemoryWriter())
        with pytest.raises(TypeError):
            logger.log(LogLevel.TRACE, "Test", StackTrace.current())

    def test_close(self):
        output = ClosingWriter()
        logger = Logger(filter=AllowAllFilter(), printer=RecordingPrinter(), output=output)

        logger.close()
        assert not logger.active
        with pytest.raises(LoggerClosedError):
            logger.log(LogLevel.TRACE, "Test")

        # Execute close() twice
        logger.close()
        assert output.close_calls == 1
        with pytest.raises(ValueError):
            logger.trace("Test")

    def test_context_manager_closes(self):
        with Logger(filter=AllowAllFilter(), printer=RecordingPrinter(), output=MemoryWriter()) as logger:
            logger.info("inside")
        assert not logger.active

    @pytest.mark.parametrize(
        "method, level",
        [
            ("trace", LogLevel.TRACE),
            ("verbose", LogLevel.TRACE),
            ("debug", LogLevel.DEBUG),
            ("info", LogLevel.INFO),
            ("warning", LogLevel.WARNING),
            ("warn", LogLevel.WARNING),
            ("error", LogLevel.ERROR),
            ("fatal", LogLevel.FATAL),
            ("critical", LogLevel.FATAL),
            ("wtf", LogLevel.FATAL),
        ],
    )
    def test_level_methods(self, method, level):
        printer = RecordingPrinter()
        logger = Logger(filter=AllowAllFilter(), printer=printer, output=MemoryWriter())
        stack_trace = StackTrace.current()

        getattr(logger, method)("Test", "Error", stack_trace)
        assert printer.last.level == level
        assert printer.last.message == "Test"
        assert printer.last.error == "Error"
        assert printer.last.stack_trace is stack_trace

        getattr(logger, method)(None)
        assert printer.last.level == level
        assert printer.last.message is None
        assert printer.last.error is None
        assert printer.last.stack_trace is None

    def test_exception_logs_active_exception(self):
        printer = RecordingPrinter()
        logger = Logger(filter=AllowAllFilter(), printer=printer, output=MemoryWriter())

        try:
            raise KeyError("missing")
        except KeyError:
            logger.exception("lookup failed")

        assert printer.last.level == LogLevel.ERROR
        assert isinstance(printer.last.error, KeyError)
        assert printer.last.stack_trace is not None

    def test_level_above_message_level(self):
        printer = RecordingPrinter()
        logger = Logger(filter=ProductionFilter(), printer=printer, output=MemoryWriter(), level=LogLevel.WARNING)

        logger.debug("This isn't logged")
        assert printer.last is None

        logger.warning("This is")
        assert printer.last.message == "This is"

    def test_default_level_above_message_level(self):
        set_default_level(LogLevel.WARNING)
        printer = RecordingPrinter()
        logger = Logger(filter=ProductionFilter(), printer=printer, output=MemoryWriter())

        logger.debug("This isn't logged")
        assert printer.last is None

        logger.warning("This is")
        assert printer.last.message == "This is"

    def test_crash_reporting_factory(self):
        logger = Logger.crash_reporting(output=MemoryWriter())
        assert isinstance(logger.filter, ProductionFilter)
        assert isinstance(logger.printer, CrashReportingPrinter)

    def test_crash_reporting_factory_with_custom_printer(self):
        printer = CrashReportingPrinter(error_level=LogLevel.OFF, on_error=lambda report: None)
        logger = Logger.crash_reporting(printer=printer, output=MemoryWriter())

        logger.debug("some message")
        assert logger.printer is printer


class TestLoggerBuilder:
    """Test builder construction."""

    def test_builder_pattern(self):
        output = MemoryWriter()
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.INFO)
            .with_filter(ProductionFilter())
            .with_printer_config(print_time=False, print_caller=False, colors=False, print_emojis=False)
            .add_writer(output)
            .build())

        assert logger.printer.config.logger_name == "builder_test"
        assert logger.filter.level == LogLevel.INFO

        logger.debug("hidden")
        logger.info("shown")
        assert output.lines == ["builder_test [INFO]   : shown"]

    def test_with_console_and_writer_uses_multi_writer(self):
        logger = (LoggerBuilder()
            .with_console(colored=False)
            .add_writer(MemoryWriter())
            .build())

        assert isinstance(logger.output, MultiWriter)
        assert not logger.printer.config.colors
        assert len(logger.output.writers) == 2

    @patch("roggle.writers.sentry_writer.sentry_sdk")
    def test_with_console_and_sentry(self, sentry):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_printer_config(print_time=False, print_caller=False, print_emojis=False)
            .with_console(colored=False, stream=stream)
            .with_sentry(category="x")
            .build())

        assert isinstance(logger.output, MultiWriter)
        console, sentry_writer = logger.output.writers
        assert isinstance(console, ConsoleWriter)
        assert isinstance(sentry_writer, SentryWriter)

        logger.info("hello")

        assert stream.getvalue() == "[INFO]   : hello\n"
        sentry.add_breadcrumb.assert_called_once_with(
            category="x", message="[INFO]   : hello", level="info"
        )
        sentry.init.assert_not_called()

    def test_with_console_only_switches_colors(self):
        builder = LoggerBuilder().with_console(colored=False)
        assert not builder.build().printer.config.colors
        assert builder.build().printer.config.print_emojis

        builder.with_console(colored=True)
        config = builder.build().printer.config
        assert config.colors
        assert config.print_emojis

    def test_add_writer_to_multi_writer(self):
        first, second = MemoryWriter(), MemoryWriter()
        multi = MultiWriter([first])
        multi.add_writer(second)
        logger = Logger(filter=AllowAllFilter(), printer=RecordingPrinter(lines=["line"]), output=multi)

        logger.info("hello")

        assert first.lines == second.lines == ["line"]

    def test_with_printer_is_used_as_is(self):
        printer = RecordingPrinter()
        logger = LoggerBuilder().with_printer(printer).add_writer(MemoryWriter()).build()
        assert logger.printer is printer
