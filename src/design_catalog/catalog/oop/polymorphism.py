"""Polymorphism: one draw() call, three behaviours."""
from abc import ABC, abstractmethod
from typing import List, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Shape(ABC):
    @abstractmethod
    def draw(self) -> str:
        """Describe how the shape is drawn."""


class Circle(Shape):
    def draw(self) -> str:
        return "Drawing a circle"


class Rectangle(Shape):
    def draw(self) -> str:
        return "Drawing a rectangle"


class Triangle(Shape):
    def draw(self) -> str:
        return "Drawing a triangle"


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    shapes: List[Shape] = [Circle(), Rectangle(), Triangle()]
    for shape in shapes:
        output.write(shape.draw())
