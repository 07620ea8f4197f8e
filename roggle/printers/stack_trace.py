"""
Stack trace capture, parsing and frame classification

A StackTrace is always innermost-first: index 0 is the frame that was
executing when the trace was taken. Python tracebacks list the most recent
call last, so they are reversed on the way in.

Three textual frame formats are understood:

    #1      Logger.log (package:roggle/core/logger.py:115:29)
    File "/app/main.py", line 16, in handler
    packages/roggle/printers/single_pretty_printer.py 91:37 log

The first two reference a package (explicitly with ``package:<name>/`` or
through the import path of the file), the last follows the
``packages/<name>/...`` convention of web-hosted interpreters.
"""

import os
import re
import sys
import sysconfig
import traceback
from collections import abc
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

LIBRARY_PACKAGE = "roggle"

# Web-hosted frames of this library start with this prefix.
RESERVED_PREFIX = f"packages/{LIBRARY_PACKAGE}/"

# Directory holding this library's sources.
LIBRARY_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

_PACKAGE_FRAME_RE = re.compile(r"^#[0-9]+\s+(?:(\S.*?) )?\(([^\s()]+)\)\s*$")
_PYTHON_FRAME_RE = re.compile(r'^\s*File "(.+)", line (\d+)(?:, in (.+))?\s*$')
_WEB_FRAME_RE = re.compile(r"^(packages/[^\s]+)\s+(\d+)(?::(\d+))?(?:\s+(.+?))?\s*$")
_LOCATION_RE = re.compile(r"^(.*?)(?::(\d+))?(?::(\d+))?$")
_TRACEBACK_HEADER_RE = re.compile(r"^\s*Traceback \(most recent call last\):\s*$")

_PACKAGE_URI_RE = re.compile(r"^package:([A-Za-z0-9_.]+)/")
_WEB_PACKAGE_RE = re.compile(r"^packages/([^/\s]+)/")
_SITE_PACKAGE_RE = re.compile(r"[\\/](?:site|dist)-packages[\\/]([^\\/]+)")

_WEB_CORE_PREFIX = "packages/python-stdlib/"


def _stdlib_dirs() -> Tuple[str, ...]:
    paths = sysconfig.get_paths()
    dirs = {paths.get("stdlib"), paths.get("platstdlib")}
    return tuple(os.path.normcase(d) for d in dirs if d)


_STDLIB_DIRS = _stdlib_dirs()


def _module_name(entry: str) -> str:
    return entry.split(".", 1)[0]


def resolve_package(uri: str) -> Optional[str]:
    """
    Work out which top-level package a frame location belongs to.

    Args:
        uri: File path or uri of the frame

    Returns:
        Package or top-level module name, or None when unknown
    """
    match = _PACKAGE_URI_RE.match(uri)
    if match:
        return match.group(1)
    match = _WEB_PACKAGE_RE.match(uri)
    if match:
        return match.group(1)
    match = _SITE_PACKAGE_RE.search(uri)
    if match:
        return _module_name(match.group(1))
    if uri.startswith("<"):
        return None

    path = os.path.normcase(os.path.abspath(uri))
    best = ""
    for entry in sys.path:
        root = os.path.normcase(os.path.abspath(entry or os.curdir))
        if path.startswith(root + os.sep) and len(root) > len(best):
            best = root
    if not best:
        return None
    relative = path[len(best) + 1:]
    return _module_name(relative.split(os.sep, 1)[0])


def is_core_uri(uri: str) -> bool:
    """True for frames of the interpreter's own standard library."""
    if uri.startswith("<frozen"):
        return True
    if uri.startswith(_WEB_CORE_PREFIX):
        return True
    if uri.startswith("<") or uri.startswith("package:") or uri.startswith("packages/"):
        return False
    if _SITE_PACKAGE_RE.search(uri):
        return False
    path = os.path.normcase(os.path.abspath(uri))
    return any(path.startswith(d + os.sep) for d in _STDLIB_DIRS)


@dataclass(frozen=True)
class Frame:
    """
    One entry of a stack trace.

    Attributes:
        uri: File path or uri of the source
        line: 1-based line number, if known
        column: 1-based column number, if known
        member: Function or method name, if known
        package: Package the frame belongs to, if known
        is_core: True for interpreter runtime frames
    """

    uri: str
    line: Optional[int] = None
    column: Optional[int] = None
    member: Optional[str] = None
    package: Optional[str] = None
    is_core: bool = False

    @classmethod
    def at(
        cls,
        uri: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        member: Optional[str] = None,
    ) -> "Frame":
        """Build a frame, deriving package and core flag from the uri."""
        return cls(
            uri=uri,
            line=line,
            column=column,
            member=member or None,
            package=resolve_package(uri),
            is_core=is_core_uri(uri),
        )

    @classmethod
    def from_summary(cls, summary: traceback.FrameSummary) -> "Frame":
        """Build a frame from a traceback.FrameSummary."""
        colno = getattr(summary, "colno", None)
        return cls.at(
            summary.filename,
            line=summary.lineno,
            column=colno + 1 if colno is not None else None,
            member=summary.name,
        )

    @classmethod
    def parse(cls, text: str) -> Optional["Frame"]:
        """
        Parse one line of a textual stack trace.

        Returns:
            The parsed frame, or None if the line is not a frame
        """
        frame, _ = _parse_line(text)
        return frame

    @property
    def location(self) -> str:
        """``uri[:line[:column]]``"""
        if self.line is None:
            return self.uri
        if self.column is None:
            return f"{self.uri}:{self.line}"
        return f"{self.uri}:{self.line}:{self.column}"

    def format(self, show_member: bool = True, show_location: bool = True) -> str:
        """Render as ``member (location)``, leaving out disabled parts."""
        parts = []
        if show_member and self.member:
            parts.append(self.member)
        if show_location:
            parts.append(f"({self.location})")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.format()


def _parse_location(location: str) -> Tuple[str, Optional[int], Optional[int]]:
    match = _LOCATION_RE.match(location)
    uri, line, column = match.group(1), match.group(2), match.group(3)
    return (
        uri,
        int(line) if line else None,
        int(column) if column else None,
    )


def _parse_line(text: str) -> Tuple[Optional[Frame], bool]:
    """Parse a line; the flag is True for Python traceback lines."""
    line = text.rstrip("\r\n")
    match = _PYTHON_FRAME_RE.match(line)
    if match:
        return Frame.at(match.group(1), int(match.group(2)), member=match.group(3)), True

    match = _PACKAGE_FRAME_RE.match(line.strip())
    if match:
        uri, lineno, column = _parse_location(match.group(2))
        return Frame.at(uri, lineno, column, member=match.group(1)), False

    match = _WEB_FRAME_RE.match(line.strip())
    if match:
        column = match.group(3)
        return Frame.at(
            match.group(1),
            int(match.group(2)),
            int(column) if column else None,
            member=match.group(4),
        ), False

    return None, False


StackTraceLike = Union["StackTrace", TracebackType, BaseException, str, Iterable[Any]]


class StackTrace(Sequence[Frame]):
    """Immutable innermost-first sequence of frames."""

    def __init__(self, frames: Iterable[Frame] = ()):
        self._frames: Tuple[Frame, ...] = tuple(frames)

    @classmethod
    def current(cls, skip: int = 0) -> "StackTrace":
        """
        Capture the call stack of the caller.

        Args:
            skip: Number of additional innermost frames to drop
        """
        summary = traceback.extract_stack()[:-1]
        frames = [Frame.from_summary(s) for s in reversed(summary)]
        return cls(frames[skip:])

    @classmethod
    def from_summary(cls, summary: Iterable[traceback.FrameSummary]) -> "StackTrace":
        """Build from an outermost-first StackSummary."""
        return cls(Frame.from_summary(s) for s in reversed(list(summary)))

    @classmethod
    def from_traceback(cls, tb: Optional[TracebackType]) -> "StackTrace":
        if tb is None:
            return cls()
        return cls.from_summary(traceback.extract_tb(tb))

    @classmethod
    def from_exception(cls, exc: BaseException) -> "StackTrace":
        return cls.from_traceback(exc.__traceback__)

    @classmethod
    def parse(cls, text: str) -> "StackTrace":
        """
        Parse a textual stack trace, skipping lines that are not frames.

        Python tracebacks (``File "...", line N, in f``) are reversed so the
        result is innermost-first like every other StackTrace. For chained
        tracebacks only the last block, the exception that propagated, is kept.
        """
        frames: List[Frame] = []
        python_style = False
        for line in text.splitlines():
            if _TRACEBACK_HEADER_RE.match(line):
                frames = []
                continue
            frame, is_python = _parse_line(line)
            if frame is None:
                continue
            python_style = python_style or is_python
            frames.append(frame)
        if python_style:
            frames.reverse()
        return cls(frames)

    @classmethod
    def coerce(cls, value: StackTraceLike) -> "StackTrace":
        """
        Turn anything trace-like into a StackTrace.

        Raises:
            TypeError: If the value cannot describe a stack trace
        """
        if isinstance(value, StackTrace):
            return value
        if isinstance(value, TracebackType):
            return cls.from_traceback(value)
        if isinstance(value, BaseException):
            return cls.from_exception(value)
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, abc.Iterable):
            items = list(value)
            if all(isinstance(item, Frame) for item in items):
                return cls(items)
            if all(isinstance(item, traceback.FrameSummary) for item in items):
                return cls.from_summary(items)
        raise TypeError(f"Cannot build a stack trace from {type(value).__name__}")

    def __getitem__(self, index):
        if isinstance(index, slice):
            return StackTrace(self._frames[index])
        return self._frames[index]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __eq__(self, other) -> bool:
        if not isinstance(other, StackTrace):
            return NotImplemented
        return self._frames == other._frames

    def __hash__(self) -> int:
        return hash(self._frames)

    def __str__(self) -> str:
        return "\n".join(f"#{i:<7}{frame}" for i, frame in enumerate(self._frames))

    def __repr__(self) -> str:
        return f"StackTrace(frames={len(self._frames)})"
