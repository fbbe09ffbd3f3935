"""Decorator: building up a coffee order one wrapper at a time.

Each decorator wraps another Coffee and adds its own price and description.
Prices are additive, so the order of the wrappers does not change the total.
"""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Coffee(ABC):
    @abstractmethod
    def get_cost(self) -> float: ...

    @abstractmethod
    def get_description(self) -> str: ...


class SimpleCoffee(Coffee):
    def get_cost(self) -> float:
        return 5.0

    def get_description(self) -> str:
        return "Simple Coffee"


class CoffeeDecorator(Coffee):
    """Delegates to the wrapped coffee; subclasses add their part."""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    def get_cost(self) -> float:
        return self._coffee.get_cost()

    def get_description(self) -> str:
        return self._coffee.get_description()


class MilkDecorator(CoffeeDecorator):
    def get_cost(self) -> float:
        return super().get_cost() + 1.5

    def get_description(self) -> str:
        return super().get_description() + ", with Milk"


class SugarDecorator(CoffeeDecorator):
    def get_cost(self) -> float:
        return super().get_cost() + 0.5

    def get_description(self) -> str:
        return super().get_description() + ", with Sugar"


def describe_order(label: str, coffee: Coffee) -> str:
    return f"{label} -> Cost: ${coffee.get_cost():g}, Description: {coffee.get_description()}"


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Decorator Pattern Demonstration ---")
    output.write("")

    coffee: Coffee = SimpleCoffee()
    output.write(describe_order("1. Base Coffee", coffee))

    coffee = MilkDecorator(coffee)
    output.write(describe_order("2. Add Milk", coffee))

    coffee = SugarDecorator(coffee)
    output.write(describe_order("3. Add Sugar", coffee))

    output.write("")
    output.write("--- Creating another complex coffee ---")
    output.write("")
    my_special_coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))
    output.write(describe_order("My Special Coffee", my_special_coffee))

    output.write("")
    output.write("--- End of Demonstration ---")
