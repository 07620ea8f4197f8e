"""Integrations with other logging systems"""

from roggle.integrations.logging_handler import RoggleHandler, attach

__all__ = ["RoggleHandler", "attach"]
