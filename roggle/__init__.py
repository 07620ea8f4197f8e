"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

roggle - A pretty, single-line logging façade for Python
Pluggable filters, printers and writers with caller resolution
"""

import logging

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from roggle.core.errors import LoggerClosedError
from roggle.core.log_event import LogEvent
from roggle.core.log_level import LogLevel, get_default_level, set_default_level
from roggle.core.logger import Logger
from roggle.core.logger_builder import LoggerBuilder
from roggle.printers.printer_config import PrinterConfig

# Import submodules (not all classes by default)
from roggle import filters
from roggle import printers
from roggle import writers

# Library diagnostics stay silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LoggerClosedError",
    "LogEvent",
    "LogLevel",
    "PrinterConfig",
    "get_default_level",
    "set_default_level",
    "filters",
    "printers",
    "writers",
]
