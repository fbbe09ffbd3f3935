"""Composite: files and directories displayed through one contract."""
from abc import ABC, abstractmethod
from typing import List, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output

INDENT_WIDTH = 2


class FileSystemItem(ABC):
    @abstractmethod
    def render(self, indent: int = 0) -> List[str]:
        """Lines describing this item and everything below it."""

    def display(self, indent: int = 0, output: Optional[OutputPort] = None) -> None:
        resolve_output(output).write_lines(self.render(indent))


class File(FileSystemItem):
    def __init__(self, name: str):
        self._name = name

    def render(self, indent: int = 0) -> List[str]:
        return [" " * (indent * INDENT_WIDTH) + "- " + self._name]


class Directory(FileSystemItem):
    def __init__(self, name: str):
        self._name = name
        self._items: List[FileSystemItem] = []

    def add(self, item: FileSystemItem) -> None:
        self._items.append(item)

    def render(self, indent: int = 0) -> List[str]:
        lines = [" " * (indent * INDENT_WIDTH) + "+ " + self._name]
        for item in self._items:
            lines.extend(item.render(indent + 1))
        return lines


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Composite Pattern Demonstration ---")
    output.write("")

    root = Directory("Root")
    root.add(File("Document.txt"))
    root.add(File("Photo.jpg"))

    sub_dir = Directory("SubFolder")
    sub_dir.add(File("Notes.txt"))
    root.add(sub_dir)

    root.display(0, output)

    output.write("")
    output.write("--- End of Demonstration ---")
