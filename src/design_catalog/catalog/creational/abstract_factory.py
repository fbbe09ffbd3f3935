"""Abstract Factory: families of GUI widgets.

A GUIFactory creates a matching button and checkbox. The Application only
ever sees the factory and product contracts, so switching the whole family
means passing a different factory.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from design_catalog.domain.base.ports import OutputPort
from design_catalog.domain.core.exceptions import ConfigurationError
from design_catalog.infrastructure.adapters.output import resolve_output


class Button(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str: ...


class WindowsButton(Button):
    def paint(self) -> str:
        return "Rendering a button in Windows style."


class WindowsCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a checkbox in Windows style."


class MacButton(Button):
    def paint(self) -> str:
        return "Rendering a button in macOS style."


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a checkbox in macOS style."


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


GUI_FACTORIES: Dict[str, Type[GUIFactory]] = {
    "windows": WindowsFactory,
    "mac": MacFactory,
}


def get_gui_factory(kind: str) -> GUIFactory:
    """
    Create the factory for a widget family.

    Args:
        kind: Family name, e.g. "windows" or "mac"

    Raises:
        ConfigurationError: If no family is registered under that name
    """
    try:
        return GUI_FACTORIES[kind.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown GUI family '{kind}'. Available: {', '.join(GUI_FACTORIES)}"
        ) from None


class Application:
    """Client that works only with the abstract factory and products."""

    def __init__(self, factory: GUIFactory, output: Optional[OutputPort] = None):
        self._button = factory.create_button()
        self._checkbox = factory.create_checkbox()
        self._output = resolve_output(output)

    def paint_ui(self) -> None:
        self._output.write(self._button.paint())
        self._output.write(self._checkbox.paint())


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Abstract Factory Pattern Demonstration ---")

    output.write("Client: Testing client code with the Windows factory type...")
    Application(get_gui_factory("windows"), output).paint_ui()

    output.write("")
    output.write("-------------------------------------")
    output.write("")

    output.write("Client: Testing the same client code with the macOS factory type...")
    Application(get_gui_factory("mac"), output).paint_ui()

    output.write("-------------------------------------")
    output.write("")
