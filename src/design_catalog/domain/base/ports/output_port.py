"""Domain port for demonstration output."""

from abc import ABC, abstractmethod
from typing import Iterable


class OutputPort(ABC):
    """Sink for the human-readable lines a demonstration produces."""

    @abstractmethod
    def write(self, line: str = "") -> None:
        """Write a single line."""

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write each line in order."""
        for line in lines:
            self.write(line)
