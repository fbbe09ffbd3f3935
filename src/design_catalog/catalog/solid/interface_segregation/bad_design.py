"""Violation: a fat device contract forces SimplePrinter to fake scan and fax.

SimplePrinter can only signal that it does not support those operations, and
callers find out at run time.
"""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.domain.core.exceptions import UnsupportedOperationError
from design_catalog.infrastructure.adapters.output import resolve_output


class MultiFunctionDevice(ABC):
    @abstractmethod
    def print(self, document: str) -> None: ...

    @abstractmethod
    def scan(self, document: str) -> None: ...

    @abstractmethod
    def fax(self, document: str) -> None: ...


class MultiFunctionPrinter(MultiFunctionDevice):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def print(self, document: str) -> None:
        self._output.write(f"Printing: {document}")

    def scan(self, document: str) -> None:
        self._output.write(f"Scanning: {document}")

    def fax(self, document: str) -> None:
        self._output.write(f"Faxing: {document}")


class SimplePrinter(MultiFunctionDevice):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def print(self, document: str) -> None:
        self._output.write(f"Printing: {document}")

    def scan(self, document: str) -> None:
        raise UnsupportedOperationError("scan", "Scan functionality is not supported.")

    def fax(self, document: str) -> None:
        raise UnsupportedOperationError("fax", "Fax functionality is not supported.")


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Bad Design (Violating ISP) ---")

    simple_printer = SimplePrinter(output)
    simple_printer.print("Invoice.pdf")
    try:
        simple_printer.scan("Photo.jpg")
    except UnsupportedOperationError as e:
        output.write(f"Error: {e}")

    output.write("----------------------------------------")
    output.write("")
