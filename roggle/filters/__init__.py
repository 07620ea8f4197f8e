"""
Log filters module

Provides various filter implementations for controlling log output.
"""

from roggle.filters.base_filter import BaseFilter
from roggle.filters.callback_filter import CallbackFilter
from roggle.filters.development_filter import DevelopmentFilter
from roggle.filters.level_filter import LevelFilter
from roggle.filters.pattern_filter import PatternFilter
from roggle.filters.production_filter import ProductionFilter
from roggle.filters.static_filter import AllowAllFilter, DenyAllFilter

__all__ = [
    "AllowAllFilter",
    "BaseFilter",
    "CallbackFilter",
    "DenyAllFilter",
    "DevelopmentFilter",
    "LevelFilter",
    "PatternFilter",
    "ProductionFilter",
]
