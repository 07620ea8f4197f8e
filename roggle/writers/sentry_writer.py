"""
Sentry crash-reporting integration

SentryWriter turns every rendered line into a Sentry breadcrumb so that the
log leading up to a crash is attached to the report. report_to_sentry() is
an on_error callback for CrashReportingPrinter that sends the error itself.
"""

import logging
from typing import Optional

import sentry_sdk

from roggle.core.log_level import LogLevel
from roggle.printers.crash_reporting_printer import CrashReportEvent
from roggle.writers.base_writer import BaseWriter, OutputEvent

logger = logging.getLogger(__name__)

# Map our levels to Sentry level names
SENTRY_LEVELS = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}


def init_sentry(dsn: str, environment: Optional[str] = None, **options) -> None:
    """
    Initialize the Sentry SDK.

    Args:
        dsn: Sentry DSN (Data Source Name) for the project
        environment: Environment name (production, staging, development)
        **options: Extra keyword arguments for sentry_sdk.init
    """
    sentry_sdk.init(dsn=dsn, environment=environment, **options)
    logger.debug("Sentry initialized for environment %s", environment)


def report_to_sentry(report: CrashReportEvent) -> None:
    """
    Send a crash report to Sentry.

    Exceptions are captured with their traceback; any other error object
    is sent as a message.
    """
    with sentry_sdk.new_scope() as scope:
        scope.set_level(SENTRY_LEVELS.get(report.level, "error"))
        scope.set_tag("fatal", str(report.fatal).lower())
        if report.reason:
            scope.set_context("log", {"reason": report.reason})
        if isinstance(report.error, BaseException):
            sentry_sdk.capture_exception(report.error)
        else:
            message = f"{report.reason}: {report.error}" if report.reason else str(report.error)
            sentry_sdk.capture_message(message, level=SENTRY_LEVELS.get(report.level, "error"))


class SentryWriter(BaseWriter):
    """Record log lines as Sentry breadcrumbs."""

    def __init__(
        self,
        category: str = "roggle",
        dsn: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """
        Initialize Sentry writer.

        Args:
            category: Breadcrumb category
            dsn: If given, initialize the Sentry SDK with this DSN
            environment: Environment name passed to the SDK with dsn

        Example:
            writer = SentryWriter(dsn="https://key@o0.ingest.sentry.io/0")
        """
        self.category = category
        self.dsn = dsn
        self.environment = environment

    def init(self) -> None:
        if self.dsn:
            init_sentry(self.dsn, environment=self.environment)

    def write(self, output: OutputEvent) -> None:
        level = SENTRY_LEVELS.get(output.level, "info")
        for line in output.lines:
            sentry_sdk.add_breadcrumb(category=self.category, message=line, level=level)

    def close(self) -> None:
        """Deliver queued Sentry events before the logger goes away."""
        sentry_sdk.flush()

    def __repr__(self) -> str:
        return f"SentryWriter(category={self.category!r})"
