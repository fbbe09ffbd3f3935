"""Abstraction: a vehicle fleet managed through contracts.

Vehicle declares what every vehicle does; how a car, a motorcycle or a truck
does it stays hidden. Refuelling and maintenance are optional capabilities,
tagged on each vehicle when it is built, so the fleet manager never needs to
inspect concrete types.

Each vehicle owns a VehicleState; the behaviour all vehicles share is written
once as free functions over that state.
"""
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, FrozenSet, List, Optional

from design_catalog.domain.base.capabilities import Capable, supports
from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output

Clock = Callable[[], datetime]

FULL_TANK = 100.0
LOW_FUEL_THRESHOLD = 20.0
MAINTENANCE_INTERVAL_DAYS = 90
INITIAL_MAINTENANCE_AGE_DAYS = 30


class VehicleCapability(str, Enum):
    """Optional contracts a vehicle may satisfy."""
    FUEL = "fuel"
    MAINTENANCE = "maintenance"


ALL_CAPABILITIES = frozenset({VehicleCapability.FUEL, VehicleCapability.MAINTENANCE})


@dataclass
class VehicleState:
    """State owned by a single vehicle."""
    model: str
    license_plate: str
    last_maintenance_date: datetime
    fuel_level: float = FULL_TANK
    is_running: bool = False


def new_vehicle_state(model: str, license_plate: str, clock: Clock = datetime.now) -> VehicleState:
    """State for a freshly registered vehicle: full tank, serviced a month ago."""
    return VehicleState(
        model=model,
        license_plate=license_plate,
        last_maintenance_date=clock() - timedelta(days=INITIAL_MAINTENANCE_AGE_DAYS),
    )


def consume_fuel(state: VehicleState, amount: float) -> None:
    state.fuel_level = max(0.0, state.fuel_level - amount)


def refuel(state: VehicleState, output: OutputPort) -> None:
    output.write(f"Refueling {state.model}...")
    state.fuel_level = FULL_TANK
    output.write("Fuel tank is now full.")


def perform_maintenance(state: VehicleState, output: OutputPort, clock: Clock = datetime.now) -> None:
    output.write(f"Performing maintenance on {state.model}...")
    state.last_maintenance_date = clock()
    output.write("Maintenance completed.")


def describe(vehicle_type: str, state: VehicleState) -> str:
    return f"{vehicle_type}: {state.model} ({state.license_plate})"


def _format_quantity(value: float) -> str:
    return f"{value:g}"


class Vehicle(Capable):
    """Contract every vehicle satisfies."""

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def accelerate(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @property
    @abstractmethod
    def vehicle_type(self) -> str: ...

    @property
    @abstractmethod
    def fuel_capacity(self) -> float:
        """Tank size in litres."""

    @property
    @abstractmethod
    def fuel_level(self) -> float:
        """Fuel level in percent."""

    @property
    @abstractmethod
    def last_maintenance_date(self) -> datetime: ...

    @abstractmethod
    def info(self) -> str: ...

    @abstractmethod
    def refuel(self) -> None:
        """Only called when tagged with VehicleCapability.FUEL."""

    @abstractmethod
    def perform_maintenance(self) -> None:
        """Only called when tagged with VehicleCapability.MAINTENANCE."""


class Car(Vehicle):
    def __init__(self, model: str, license_plate: str, number_of_doors: int,
                 output: Optional[OutputPort] = None, clock: Clock = datetime.now,
                 capabilities: FrozenSet[VehicleCapability] = ALL_CAPABILITIES):
        self._state = new_vehicle_state(model, license_plate, clock)
        self._number_of_doors = number_of_doors
        self._output = resolve_output(output)
        self._clock = clock
        self._capabilities = frozenset(capabilities)

    @property
    def capabilities(self) -> FrozenSet[VehicleCapability]:
        return self._capabilities

    @property
    def vehicle_type(self) -> str:
        return "Car"

    @property
    def fuel_capacity(self) -> float:
        return 60.0

    @property
    def fuel_level(self) -> float:
        return self._state.fuel_level

    @property
    def last_maintenance_date(self) -> datetime:
        return self._state.last_maintenance_date

    def start(self) -> None:
        self._output.write(f"Starting car engine for {self._state.model}")
        self._state.is_running = True

    def accelerate(self) -> None:
        if self._state.is_running:
            self._output.write(f"Car {self._state.model} is accelerating smoothly")
            consume_fuel(self._state, 2.0)
        else:
            self._output.write("Cannot accelerate - car is not running")

    def stop(self) -> None:
        self._output.write(f"Car {self._state.model} is stopping")
        self._state.is_running = False

    def info(self) -> str:
        return describe(self.vehicle_type, self._state) + f" - {self._number_of_doors} doors"

    def refuel(self) -> None:
        refuel(self._state, self._output)

    def perform_maintenance(self) -> None:
        perform_maintenance(self._state, self._output, self._clock)


class Motorcycle(Vehicle):
    def __init__(self, model: str, license_plate: str, has_sidecar: bool,
                 output: Optional[OutputPort] = None, clock: Clock = datetime.now,
                 capabilities: FrozenSet[VehicleCapability] = ALL_CAPABILITIES):
        self._state = new_vehicle_state(model, license_plate, clock)
        self._has_sidecar = has_sidecar
        self._output = resolve_output(output)
        self._clock = clock
        self._capabilities = frozenset(capabilities)

    @property
    def capabilities(self) -> FrozenSet[VehicleCapability]:
        return self._capabilities

    @property
    def vehicle_type(self) -> str:
        return "Motorcycle"

    @property
    def fuel_capacity(self) -> float:
        return 20.0

    @property
    def fuel_level(self) -> float:
        return self._state.fuel_level

    @property
    def last_maintenance_date(self) -> datetime:
        return self._state.last_maintenance_date

    def start(self) -> None:
        self._output.write(f"Kicking start motorcycle {self._state.model}")
        self._state.is_running = True

    def accelerate(self) -> None:
        if self._state.is_running:
            self._output.write(f"Motorcycle {self._state.model} is accelerating with a roar!")
            consume_fuel(self._state, 3.0)
        else:
            self._output.write("Cannot accelerate - motorcycle is not running")

    def stop(self) -> None:
        self._output.write(f"Motorcycle {self._state.model} is braking")
        self._state.is_running = False

    def info(self) -> str:
        return describe(self.vehicle_type, self._state) + (" with sidecar" if self._has_sidecar else "")

    def refuel(self) -> None:
        refuel(self._state, self._output)

    def perform_maintenance(self) -> None:
        perform_maintenance(self._state, self._output, self._clock)


class Truck(Vehicle):
    def __init__(self, model: str, license_plate: str, cargo_capacity: float,
                 output: Optional[OutputPort] = None, clock: Clock = datetime.now,
                 capabilities: FrozenSet[VehicleCapability] = ALL_CAPABILITIES):
        self._state = new_vehicle_state(model, license_plate, clock)
        self._cargo_capacity = cargo_capacity
        self._output = resolve_output(output)
        self._clock = clock
        self._capabilities = frozenset(capabilities)

    @property
    def capabilities(self) -> FrozenSet[VehicleCapability]:
        return self._capabilities

    @property
    def vehicle_type(self) -> str:
        return "Truck"

    @property
    def fuel_capacity(self) -> float:
        return 200.0

    @property
    def fuel_level(self) -> float:
        return self._state.fuel_level

    @property
    def last_maintenance_date(self) -> datetime:
        return self._state.last_maintenance_date

    def start(self) -> None:
        self._output.write(f"Starting diesel engine for truck {self._state.model}")
        self._state.is_running = True

    def accelerate(self) -> None:
        if self._state.is_running:
            self._output.write(f"Truck {self._state.model} is accelerating slowly but powerfully")
            consume_fuel(self._state, 5.0)
        else:
            self._output.write("Cannot accelerate - truck is not running")

    def stop(self) -> None:
        self._output.write(f"Truck {self._state.model} is using air brakes to stop")
        self._state.is_running = False

    def info(self) -> str:
        return (describe(self.vehicle_type, self._state)
                + f" - Cargo capacity: {_format_quantity(self._cargo_capacity)}kg")

    def refuel(self) -> None:
        refuel(self._state, self._output)

    def perform_maintenance(self) -> None:
        perform_maintenance(self._state, self._output, self._clock)

    def load_cargo(self) -> None:
        self._output.write(f"Loading cargo into {self._state.model}")


class FleetManager:
    """Manages any vehicle through the Vehicle contract and capability tags."""

    def __init__(self, output: Optional[OutputPort] = None, clock: Clock = datetime.now):
        self._output = resolve_output(output)
        self._clock = clock

    def manage_fleet(self, vehicles: List[Vehicle]) -> None:
        self._output.write("Fleet Manager: Managing vehicle operations...")
        self._output.write("")

        for vehicle in vehicles:
            self._output.write(f"Managing {vehicle.info()}")

            if supports(vehicle, VehicleCapability.FUEL) and vehicle.fuel_level < LOW_FUEL_THRESHOLD:
                self._output.write("Low fuel detected - scheduling refuel")
                vehicle.refuel()

            overdue = self._clock() - vehicle.last_maintenance_date > timedelta(days=MAINTENANCE_INTERVAL_DAYS)
            if supports(vehicle, VehicleCapability.MAINTENANCE) and overdue:
                self._output.write("Maintenance due - scheduling service")
                vehicle.perform_maintenance()

            self._output.write("")


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("=== Abstraction Demonstration ===")
    output.write("")

    vehicles: List[Vehicle] = [
        Car("Toyota Camry", "ABC123", 4, output=output),
        Motorcycle("Harley Davidson", "XYZ789", True, output=output),
        Truck("Ford F-150", "TRK456", 2000, output=output),
    ]

    output.write("--- Vehicle Operations (Using Abstraction) ---")
    for vehicle in vehicles:
        output.write("")
        output.write(vehicle.info())

        vehicle.start()
        vehicle.accelerate()
        vehicle.stop()

        if supports(vehicle, VehicleCapability.FUEL):
            vehicle.refuel()
        if supports(vehicle, VehicleCapability.MAINTENANCE):
            vehicle.perform_maintenance()

        output.write(f"Fuel Level: {_format_quantity(vehicle.fuel_level)}%")
        output.write("---")

    output.write("")
    output.write("--- Fleet Management (Polymorphism with Abstraction) ---")
    FleetManager(output).manage_fleet(vehicles)
