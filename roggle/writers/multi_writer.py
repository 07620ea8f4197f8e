"""Writer that fans out to several writers"""

from typing import Iterable, List

from roggle.writers.base_writer import BaseWriter, OutputEvent


class MultiWriter(BaseWriter):
    """
    Send every event to several writers, in registration order.

    An exception from one writer propagates after the writers before it
    have written.
    """

    def __init__(self, writers: Iterable[BaseWriter] = ()):
        self.writers: List[BaseWriter] = list(writers)

    def add_writer(self, writer: BaseWriter) -> None:
        self.writers.append(writer)

    def init(self) -> None:
        for writer in self.writers:
            writer.init()

    def write(self, output: OutputEvent) -> None:
        for writer in self.writers:
            writer.write(output)

    def close(self) -> None:
        for writer in self.writers:
            writer.close()

    def __repr__(self) -> str:
        names = ", ".join(type(w).__name__ for w in self.writers)
        return f"MultiWriter([{names}])"
