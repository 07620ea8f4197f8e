#!/usr/bin/env python3
"""Basic usage example"""

import logging

from roggle import Logger, LoggerBuilder, LogLevel
from roggle.integrations import attach
from roggle.printers import SinglePrettyPrinter


def load_config(path):
    raise FileNotFoundError(path)


def main():
    # Default logger: development filter, pretty printer, console output
    logger = Logger()
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Application started")
    logger.warning("This is warning")

    try:
        load_config("settings.toml")
    except FileNotFoundError as exc:
        logger.error("Could not load config", exc)

    # Expensive messages are only built when the event passes the filter
    logger.debug(lambda: {"users": 1200, "regions": ["eu", "us"]})
    logger.close()

    # Builder pattern with a named logger and stack traces for errors
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.INFO)
        .with_printer(SinglePrettyPrinter(
            logger_name="example",
            stack_trace_level=LogLevel.ERROR,
            stack_trace_method_count=5,
        ))
        .with_console(colored=True)
        .build())

    logger.debug("Filtered out")
    logger.fatal("This is fatal")

    # Forward records from the standard logging module
    handler = attach(logger, "example.requests")
    logging.getLogger("example.requests").warning("Slow response: %.1fs", 2.4)
    logging.getLogger("example.requests").removeHandler(handler)

    with logger:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
