"""Output port adapters."""
import sys
from typing import List, Optional, TextIO

from design_catalog.domain.base.ports import OutputPort


class ConsoleOutput(OutputPort):
    """Writes lines to a text stream, stdout unless told otherwise."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def write(self, line: str = "") -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{line}\n")


class BufferedOutput(OutputPort):
    """Collects lines in memory."""

    def __init__(self):
        self._lines: List[str] = []

    def write(self, line: str = "") -> None:
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def clear(self) -> None:
        self._lines.clear()

    def __contains__(self, line: str) -> bool:
        return line in self._lines


def resolve_output(output: Optional[OutputPort] = None) -> OutputPort:
    """Return the given sink, or a console sink when none is supplied."""
    return output if output is not None else ConsoleOutput()
