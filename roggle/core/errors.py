"""Exceptions raised at the logger call boundary"""


class LoggerClosedError(ValueError):
    """
    Raised when logging through a logger after close().

    Subclasses ValueError so callers that guard log calls against bad
    arguments also see this failure.
    """

    def __init__(self, message: str = "Logger has already been closed."):
        super().__init__(message)
