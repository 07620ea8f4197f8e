"""Tests for the standard logging bridge"""

import logging

import pytest

from roggle import Logger, LogLevel
from roggle.filters import AllowAllFilter
from roggle.integrations import RoggleHandler, attach
from roggle.printers import SimplePrinter
from roggle.writers import MemoryWriter


@pytest.fixture
def output():
    return MemoryWriter()


@pytest.fixture
def roggle_logger(output):
    return Logger(filter=AllowAllFilter(), printer=SimplePrinter(colors=False), output=output)


@pytest.fixture
def std_logger(roggle_logger):
    std = logging.getLogger("roggle_test_app")
    std.setLevel(logging.DEBUG)
    std.propagate = False
    handler = attach(roggle_logger, "roggle_test_app")
    yield std
    std.removeHandler(handler)


class TestRoggleHandler:
    """Test forwarding of stdlib records."""

    def test_forwards_message(self, std_logger, output):
        std_logger.warning("disk at %d%%", 91)
        assert output.lines == ["[W] disk at 91%"]

    def test_level_mapping(self, std_logger, output):
        std_logger.debug("d")
        std_logger.info("i")
        std_logger.error("e")
        std_logger.critical("c")
        assert [event.level for event in output.events] == [
            LogLevel.DEBUG, LogLevel.INFO, LogLevel.ERROR, LogLevel.FATAL,
        ]

    def test_exception_info(self, std_logger, output):
        try:
            raise ValueError("boom")
        except ValueError:
            std_logger.exception("failed")

        event = output.events[0].event
        assert event.level == LogLevel.ERROR
        assert isinstance(event.error, ValueError)
        assert event.stack_trace is not None
        assert output.lines[0] == "[E] failed  ERROR: boom"

    def test_ignores_own_records(self, roggle_logger, output):
        handler = RoggleHandler(roggle_logger)
        record = logging.LogRecord("roggle.core.logger", logging.INFO, __file__, 1, "x", None, None)
        handler.emit(record)
        assert len(output) == 0

    def test_closed_logger_is_handled(self, roggle_logger, output, monkeypatch):
        handler = RoggleHandler(roggle_logger)
        errors = []
        monkeypatch.setattr(handler, "handleError", errors.append)
        roggle_logger.close()

        record = logging.LogRecord("app", logging.INFO, __file__, 1, "x", None, None)
        handler.emit(record)

        assert errors == [record]
