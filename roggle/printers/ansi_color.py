"""ANSI color wrapper used by the printers"""

from typing import Optional


class AnsiColor:
    """
    Callable that wraps text in ANSI 256-color escape codes.

    A color with neither foreground nor background is a passthrough.

    Example:
        warning = AnsiColor.fg(208)
        print(warning("disk almost full"))
    """

    ANSI_ESC = "\x1b["
    ANSI_RESET = "\x1b[0m"

    def __init__(self, fg: Optional[int] = None, bg: Optional[int] = None):
        self.foreground = fg
        self.background = bg

    @classmethod
    def none(cls) -> "AnsiColor":
        return cls()

    @classmethod
    def fg(cls, color: int) -> "AnsiColor":
        return cls(fg=color)

    @staticmethod
    def grey(level: float) -> int:
        """Palette index of a grey; level runs from 0.0 (black) to 1.0 (white)."""
        level = min(max(level, 0.0), 1.0)
        return 232 + int(round(level * 23))

    @property
    def color_on(self) -> bool:
        return self.foreground is not None or self.background is not None

    @property
    def prefix(self) -> str:
        codes = ""
        if self.foreground is not None:
            codes += f"{self.ANSI_ESC}38;5;{self.foreground}m"
        if self.background is not None:
            codes += f"{self.ANSI_ESC}48;5;{self.background}m"
        return codes

    def __call__(self, text: str) -> str:
        if not self.color_on:
            return text
        return f"{self.prefix}{text}{self.ANSI_RESET}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, AnsiColor):
            return NotImplemented
        return (self.foreground, self.background) == (other.foreground, other.background)

    def __hash__(self) -> int:
        return hash((self.foreground, self.background))

    def __repr__(self) -> str:
        return f"AnsiColor(fg={self.foreground}, bg={self.background})"
