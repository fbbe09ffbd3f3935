"""Violation: Square overrides Rectangle's setters and breaks its contract.

Code written against Rectangle assumes width and height change independently.
Square ties them together, so substituting a Square silently changes the
result. This is kept broken on purpose.
"""
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Rectangle:
    def __init__(self):
        self._width = 0
        self._height = 0

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    def get_area(self) -> int:
        return self.width * self.height


class Square(Rectangle):
    """A square "is-a" rectangle, which is exactly where it goes wrong."""

    @Rectangle.width.setter
    def width(self, value: int) -> None:
        self._width = value
        self._height = value

    @Rectangle.height.setter
    def height(self, value: int) -> None:
        self._width = value
        self._height = value


class AreaCalculator:
    EXPECTED_AREA = 50

    @staticmethod
    def calculate_and_print_area(rectangle: Rectangle, output: Optional[OutputPort] = None) -> int:
        output = resolve_output(output)
        rectangle.width = 5
        rectangle.height = 10
        area = rectangle.get_area()
        output.write(f"Expected Area: {AreaCalculator.EXPECTED_AREA}, Actual Area: {area}")
        if area != AreaCalculator.EXPECTED_AREA:
            output.write("LSP Violation Detected! The behavior is incorrect.")
        return area


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Bad Design (Violating LSP) ---")

    output.write("Testing with Rectangle:")
    AreaCalculator.calculate_and_print_area(Rectangle(), output)

    output.write("")
    output.write("Testing with Square (the substitute):")
    AreaCalculator.calculate_and_print_area(Square(), output)

    output.write("----------------------------------------")
    output.write("")
