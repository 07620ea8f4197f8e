"""
Bridge from the standard library logging module

Routes records emitted through logging.getLogger(...) into a roggle Logger
so third-party libraries share the same filter, printer and output.
"""

import logging
from typing import Optional

from roggle.core.log_level import LogLevel
from roggle.core.logger import Logger


class RoggleHandler(logging.Handler):
    """
    logging.Handler that forwards records to a roggle Logger.

    Records from roggle's own loggers are ignored so that diagnostics of the
    bridge cannot loop back into it.

    Example:
        handler = RoggleHandler(Logger())
        logging.getLogger().addHandler(handler)
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == "roggle" or record.name.startswith("roggle."):
            return
        try:
            error = None
            stack_trace = None
            if record.exc_info and record.exc_info[1] is not None:
                error = record.exc_info[1]
                stack_trace = record.exc_info[2]
            self.logger.log(
                LogLevel.from_logging_level(record.levelno),
                record.getMessage,
                error,
                stack_trace,
            )
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def attach(
    logger: Logger,
    name: Optional[str] = None,
    level: int = logging.NOTSET,
) -> RoggleHandler:
    """
    Attach a RoggleHandler to a stdlib logger.

    Args:
        logger: Roggle logger receiving the records
        name: Stdlib logger name (default: the root logger)
        level: Handler level

    Returns:
        The attached handler, for later removeHandler()
    """
    handler = RoggleHandler(logger, level)
    logging.getLogger(name).addHandler(handler)
    return handler
