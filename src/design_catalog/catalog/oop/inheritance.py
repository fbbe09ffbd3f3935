"""Inheritance: dogs and cats share animal behaviour.

Animal is a narrow contract whose eat/sleep/speak helpers are written once
against the name and output each concrete animal owns. No state lives in the
base class.
"""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Animal(ABC):
    """Contract for all animals, with shared default behaviour."""

    def __init__(self, output: OutputPort):
        output.write("Animal constructor called.")

    @property
    @abstractmethod
    def name(self) -> str:
        """The animal's name."""

    @property
    @abstractmethod
    def output(self) -> OutputPort:
        """Where the animal reports what it does."""

    def eat(self) -> None:
        self.output.write(f"{self.name} is eating.")

    def sleep(self) -> None:
        self.output.write(f"{self.name} is sleeping.")

    def speak(self) -> None:
        self.output.write(f"{self.name} makes a sound.")


class Dog(Animal):
    def __init__(self, name: str, breed: str, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)
        super().__init__(self._output)
        self._name = name
        self._breed = breed
        self._output.write("Dog constructor called.")

    @property
    def name(self) -> str:
        return self._name

    @property
    def breed(self) -> str:
        return self._breed

    @property
    def output(self) -> OutputPort:
        return self._output

    def speak(self) -> None:
        self._output.write(f"{self._name} barks!")

    def fetch(self) -> None:
        self._output.write(f"{self._name} is fetching the ball.")


class Cat(Animal):
    def __init__(self, name: str, breed: str, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)
        super().__init__(self._output)
        self._name = name
        self._breed = breed
        self._output.write("Cat constructor called.")

    @property
    def name(self) -> str:
        return self._name

    @property
    def breed(self) -> str:
        return self._breed

    @property
    def output(self) -> OutputPort:
        return self._output

    def speak(self) -> None:
        self._output.write(f"{self._name} meows.")

    def purr(self) -> None:
        self._output.write(f"{self._name} is purring.")


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("=== Inheritance Demonstration ===")
    output.write("")

    my_dog = Dog("Buddy", "Golden Retriever", output=output)
    output.write(f"Created a {my_dog.breed} named {my_dog.name}.")
    my_dog.eat()
    my_dog.sleep()
    my_dog.speak()
    my_dog.fetch()

    output.write("")
    output.write("-----------------------------------")
    output.write("")

    my_cat = Cat("Whiskers", "Siamese", output=output)
    output.write(f"Created a {my_cat.breed} named {my_cat.name}.")
    my_cat.eat()
    my_cat.sleep()
    my_cat.speak()
    my_cat.purr()
