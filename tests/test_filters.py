"""Tests for log filters"""

import pytest

from roggle import LogLevel
from roggle.core.log_event import LogEvent
from roggle.core.log_level import get_default_level, set_default_level
from roggle.filters import (
    AllowAllFilter,
    CallbackFilter,
    DenyAllFilter,
    DevelopmentFilter,
    LevelFilter,
    PatternFilter,
    ProductionFilter,
)


@pytest.fixture(autouse=True)
def restore_default_level():
    level = get_default_level()
    yield
    set_default_level(level)


def event(level=LogLevel.INFO, message="hello"):
    return LogEvent(level, message)


class TestStaticFilters:
    """Test allow-all and deny-all filters."""

    def test_allow_all(self):
        assert AllowAllFilter()(event(LogLevel.TRACE))

    def test_deny_all(self):
        assert not DenyAllFilter()(event(LogLevel.FATAL))


class TestThresholdFilters:
    """Test production and development filters."""

    @pytest.mark.parametrize("filter_class", [ProductionFilter, DevelopmentFilter])
    def test_threshold(self, filter_class):
        log_filter = filter_class(LogLevel.WARNING)
        assert not log_filter.should_log(event(LogLevel.INFO))
        assert log_filter.should_log(event(LogLevel.WARNING))
        assert log_filter.should_log(event(LogLevel.ERROR))

    @pytest.mark.parametrize("filter_class", [ProductionFilter, DevelopmentFilter])
    def test_follows_default_level(self, filter_class):
        log_filter = filter_class()
        set_default_level(LogLevel.ERROR)
        assert log_filter.level == LogLevel.ERROR
        assert not log_filter.should_log(event(LogLevel.WARNING))

        set_default_level(LogLevel.TRACE)
        assert log_filter.should_log(event(LogLevel.TRACE))

    def test_own_level_overrides_default(self):
        log_filter = ProductionFilter(LogLevel.DEBUG)
        set_default_level(LogLevel.FATAL)
        assert log_filter.should_log(event(LogLevel.DEBUG))

    def test_level_setter_rejects_other_types(self):
        log_filter = ProductionFilter()
        with pytest.raises(TypeError):
            log_filter.level = "info"

    def test_off_threshold_blocks_everything(self):
        log_filter = ProductionFilter(LogLevel.OFF)
        assert not any(log_filter.should_log(event(level)) for level in LogLevel.real_levels())


class TestLevelFilter:
    """Test level range filter."""

    def test_range(self):
        log_filter = LevelFilter(min_level=LogLevel.DEBUG, max_level=LogLevel.INFO)
        assert not log_filter(event(LogLevel.TRACE))
        assert log_filter(event(LogLevel.DEBUG))
        assert log_filter(event(LogLevel.INFO))
        assert not log_filter(event(LogLevel.WARNING))

    def test_minimum_defaults_to_filter_level(self):
        log_filter = LevelFilter(max_level=LogLevel.ERROR)
        log_filter.level = LogLevel.WARNING
        assert not log_filter(event(LogLevel.INFO))
        assert log_filter(event(LogLevel.WARNING))
        assert not log_filter(event(LogLevel.FATAL))


class TestPatternFilter:
    """Test regex filter."""

    def test_include(self):
        log_filter = PatternFilter(r"payment")
        assert log_filter(event(message="payment accepted"))
        assert not log_filter(event(message="user logged in"))

    def test_exclude(self):
        log_filter = PatternFilter(r"^GET /healthz", exclude=True)
        assert not log_filter(event(message="GET /healthz 200"))
        assert log_filter(event(message="GET /orders 200"))

    def test_case_insensitive(self):
        log_filter = PatternFilter(r"error", case_sensitive=False)
        assert log_filter(event(message="ERROR in worker"))

    def test_lazy_message_evaluated_once(self):
        calls = []

        def build():
            calls.append(1)
            return "payment accepted"

        log_event = LogEvent(LogLevel.INFO, build)
        assert PatternFilter(r"payment")(log_event)
        assert log_event.message_text == "payment accepted"
        assert len(calls) == 1


class TestCallbackFilter:
    """Test callback filter."""

    def test_callback_decides(self):
        log_filter = CallbackFilter(lambda e: e.level >= LogLevel.ERROR or "pay" in e.message_text)
        assert log_filter(event(LogLevel.ERROR, "x"))
        assert log_filter(event(LogLevel.INFO, "pay"))
        assert not log_filter(event(LogLevel.INFO, "x"))

    def test_callback_errors_propagate(self):
        def broken(e):
            raise RuntimeError("broken filter")

        with pytest.raises(RuntimeError):
            CallbackFilter(broken)(event())
