"""Adherence: one small contract per capability.

A device implements only the contracts it can honour and is tagged with the
matching capabilities, so a caller can never ask a simple printer to scan.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, List, Optional

from design_catalog.domain.base.capabilities import Capable, supports
from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class DeviceCapability(str, Enum):
    PRINT = "print"
    SCAN = "scan"
    FAX = "fax"


class Printer(ABC):
    @abstractmethod
    def print(self, document: str) -> None: ...


class Scanner(ABC):
    @abstractmethod
    def scan(self, document: str) -> None: ...


class Faxer(ABC):
    @abstractmethod
    def fax(self, document: str) -> None: ...


class SimplePrinter(Printer, Capable):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    @property
    def capabilities(self) -> FrozenSet[DeviceCapability]:
        return frozenset({DeviceCapability.PRINT})

    def print(self, document: str) -> None:
        self._output.write(f"Printing: {document}")


class StandaloneScanner(Scanner, Capable):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    @property
    def capabilities(self) -> FrozenSet[DeviceCapability]:
        return frozenset({DeviceCapability.SCAN})

    def scan(self, document: str) -> None:
        self._output.write(f"Scanning: {document}")


class MultiFunctionPrinter(Printer, Scanner, Capable):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    @property
    def capabilities(self) -> FrozenSet[DeviceCapability]:
        return frozenset({DeviceCapability.PRINT, DeviceCapability.SCAN})

    def print(self, document: str) -> None:
        self._output.write(f"Printing: {document}")

    def scan(self, document: str) -> None:
        self._output.write(f"Scanning: {document}")


def scan_with_available(devices: List[Capable], document: str) -> int:
    """Scan the document on every device that can scan. Returns how many did."""
    scanners = [device for device in devices if supports(device, DeviceCapability.SCAN)]
    for scanner in scanners:
        scanner.scan(document)
    return len(scanners)


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Good Design (Adhering to ISP) ---")

    printer: Printer = SimplePrinter(output)
    printer.print("Invoice.pdf")

    multi_device = MultiFunctionPrinter(output)
    multi_device.print("Report.docx")
    multi_device.scan("Photo.jpg")

    output.write("Scanning on every device that can scan:")
    scan_with_available([printer, multi_device, StandaloneScanner(output)], "Contract.pdf")

    output.write("-----------------------------------------")
    output.write("")
