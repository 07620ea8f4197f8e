"""
Printer configuration management

Decoration switches and per-level maps read by the pretty printers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Optional

from roggle.core.log_level import LogLevel
from roggle.printers.ansi_color import AnsiColor

TimeFormatter = Callable[[datetime], str]


def format_time(now: datetime) -> str:
    """
    Format a time as ``HH:MM:SS.mmm``.

    Example:
        >>> format_time(datetime(2022, 1, 1, 6, 46, 15, 354000))
        '06:46:15.354'
    """
    return (
        f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}"
        f".{now.microsecond // 1000:03d}"
    )


DEFAULT_STACK_TRACE_METHOD_COUNT = 20
DEFAULT_STACK_TRACE_PREFIX = "│ "

DEFAULT_LEVEL_COLORS: Dict[LogLevel, AnsiColor] = {
    LogLevel.TRACE: AnsiColor.fg(AnsiColor.grey(0.5)),
    LogLevel.DEBUG: AnsiColor.none(),
    LogLevel.INFO: AnsiColor.fg(12),
    LogLevel.WARNING: AnsiColor.fg(208),
    LogLevel.ERROR: AnsiColor.fg(196),
    LogLevel.FATAL: AnsiColor.fg(199),
}

DEFAULT_LEVEL_EMOJIS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "🐱",
    LogLevel.DEBUG: "🐛",
    LogLevel.INFO: "💡",
    LogLevel.WARNING: "⚠️",
    LogLevel.ERROR: "⛔",
    LogLevel.FATAL: "👾",
}

# Labels share one width so messages line up.
DEFAULT_LEVEL_LABELS: Dict[LogLevel, str] = {
    level: f"[{level.name}]".ljust(9) for level in LogLevel.real_levels()
}


@dataclass
class PrinterConfig:
    """
    Pretty printer configuration.

    Per-level maps passed in are merged over the defaults, so overriding a
    single level is enough.
    """

    # Prefix decorations
    logger_name: Optional[str] = None
    colors: bool = True
    print_caller: bool = True
    print_function_name: bool = True
    print_location: bool = True
    print_emojis: bool = True
    print_labels: bool = True
    print_time: bool = True

    # Stack trace settings
    stack_trace_level: LogLevel = LogLevel.OFF
    stack_trace_method_count: Optional[int] = DEFAULT_STACK_TRACE_METHOD_COUNT
    stack_trace_prefix: str = DEFAULT_STACK_TRACE_PREFIX

    # Per-level decorations
    level_colors: Dict[LogLevel, AnsiColor] = field(default_factory=dict)
    level_emojis: Dict[LogLevel, str] = field(default_factory=dict)
    level_labels: Dict[LogLevel, str] = field(default_factory=dict)
    time_formatter: TimeFormatter = format_time

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.stack_trace_level, LogLevel):
            raise ValueError("stack_trace_level must be LogLevel enum")
        if self.stack_trace_method_count is not None and self.stack_trace_method_count < 0:
            raise ValueError("stack_trace_method_count cannot be negative")
        if not callable(self.time_formatter):
            raise ValueError("time_formatter must be callable")

        self.level_colors = {**DEFAULT_LEVEL_COLORS, **self.level_colors}
        self.level_emojis = {**DEFAULT_LEVEL_EMOJIS, **self.level_emojis}
        self.level_labels = {**DEFAULT_LEVEL_LABELS, **self.level_labels}

    @classmethod
    def default(cls) -> "PrinterConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def plain(cls) -> "PrinterConfig":
        """Create configuration for sinks that cannot render colors or emoji."""
        return cls(colors=False, print_emojis=False)

    @classmethod
    def crash_reporting(cls) -> "PrinterConfig":
        """Create configuration for crash-reporting breadcrumbs."""
        return cls(
            colors=False,
            print_emojis=False,
            print_time=False,
        )
