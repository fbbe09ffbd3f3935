"""Adherence: Rectangle and Square are siblings under a Shape contract."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Shape(ABC):
    @abstractmethod
    def get_area(self) -> int: ...


@dataclass
class Rectangle(Shape):
    width: int = 0
    height: int = 0

    def get_area(self) -> int:
        return self.width * self.height


@dataclass
class Square(Shape):
    side: int = 0

    def get_area(self) -> int:
        return self.side * self.side


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Good Design (Adhering to LSP) ---")

    rect: Shape = Rectangle(width=5, height=10)
    square: Shape = Square(side=5)

    output.write(f"Area of Rectangle: {rect.get_area()}")
    output.write(f"Area of Square: {square.get_area()}")

    output.write("-----------------------------------------")
    output.write("")
