"""Builder: assembling computers step by step.

Concrete builders decide what goes into each part; the ComputerManufacturer
director decides the order of the steps.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


@dataclass
class Computer:
    cpu_type: Optional[str] = None
    ram: Optional[str] = None
    storage: Optional[str] = None
    graphics_card: Optional[str] = None

    def configuration_lines(self) -> List[str]:
        return [
            "--- Computer Configuration ---",
            f"CPU: {self.cpu_type}",
            f"RAM: {self.ram}",
            f"Storage: {self.storage}",
            f"Graphics Card: {self.graphics_card or 'Integrated'}",
            "----------------------------",
        ]

    def display_configuration(self, output: Optional[OutputPort] = None) -> None:
        resolve_output(output).write_lines(self.configuration_lines())


class ComputerBuilder(ABC):
    @abstractmethod
    def build_cpu(self) -> None: ...

    @abstractmethod
    def build_ram(self) -> None: ...

    @abstractmethod
    def build_storage(self) -> None: ...

    @abstractmethod
    def build_graphics_card(self) -> None: ...

    @abstractmethod
    def get_computer(self) -> Computer: ...


class GamingComputerBuilder(ComputerBuilder):
    """Builds a high-end gaming computer."""

    def __init__(self):
        self._computer = Computer()

    def build_cpu(self) -> None:
        self._computer.cpu_type = "Intel Core i9"

    def build_ram(self) -> None:
        self._computer.ram = "32GB DDR5"

    def build_storage(self) -> None:
        self._computer.storage = "2TB NVMe SSD"

    def build_graphics_card(self) -> None:
        self._computer.graphics_card = "NVIDIA RTX 4090"

    def get_computer(self) -> Computer:
        return self._computer


class OfficeComputerBuilder(ComputerBuilder):
    """Builds a standard office computer."""

    def __init__(self):
        self._computer = Computer()

    def build_cpu(self) -> None:
        self._computer.cpu_type = "Intel Core i5"

    def build_ram(self) -> None:
        self._computer.ram = "16GB DDR4"

    def build_storage(self) -> None:
        self._computer.storage = "512GB SATA SSD"

    def build_graphics_card(self) -> None:
        pass  # integrated graphics

    def get_computer(self) -> Computer:
        return self._computer


class ComputerManufacturer:
    """Director: runs the build steps in order against any builder."""

    def construct(self, builder: ComputerBuilder) -> Computer:
        builder.build_cpu()
        builder.build_ram()
        builder.build_storage()
        builder.build_graphics_card()
        return builder.get_computer()


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Builder Pattern Demonstration ---")

    manufacturer = ComputerManufacturer()

    output.write("Building a Gaming PC...")
    gaming_builder = GamingComputerBuilder()
    manufacturer.construct(gaming_builder)
    gaming_builder.get_computer().display_configuration(output)

    output.write("")
    output.write("-------------------------------------")
    output.write("")

    output.write("Building an Office PC...")
    office_builder = OfficeComputerBuilder()
    manufacturer.construct(office_builder)
    office_builder.get_computer().display_configuration(output)

    output.write("-------------------------------------")
    output.write("")
