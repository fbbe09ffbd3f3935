"""Factory Method: logistics that defer the choice of transport to subclasses."""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Transport(ABC):
    @abstractmethod
    def deliver(self) -> str: ...


class Truck(Transport):
    def deliver(self) -> str:
        return "Delivering by land in a truck."


class Ship(Transport):
    def deliver(self) -> str:
        return "Delivering by sea in a ship."


class Logistics(ABC):
    """Creator: business logic written against whatever transport it creates."""

    @abstractmethod
    def create_transport(self) -> Transport:
        """The factory method."""

    def plan_delivery(self, output: Optional[OutputPort] = None) -> str:
        output = resolve_output(output)
        transport = self.create_transport()
        output.write("Logistics: Planning delivery...")
        result = transport.deliver()
        output.write(result)
        return result


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def client_code(creator: Logistics, output: Optional[OutputPort] = None) -> str:
    return creator.plan_delivery(output)


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Factory Method Pattern Demonstration ---")

    output.write("App: Launched with the RoadLogistics.")
    client_code(RoadLogistics(), output)

    output.write("")
    output.write("-------------------------------------")
    output.write("")

    output.write("App: Launched with the SeaLogistics.")
    client_code(SeaLogistics(), output)

    output.write("-------------------------------------")
    output.write("")
