"""Bridge: remotes and devices vary independently.

Any remote works with any device because remotes only talk to the Device
implementor contract.
"""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output

MIN_VOLUME = 0
MAX_VOLUME = 100
VOLUME_STEP = 10


def clamp_volume(percent: int) -> int:
    return max(MIN_VOLUME, min(MAX_VOLUME, percent))


class Device(ABC):
    """Implementor contract."""

    @abstractmethod
    def is_enabled(self) -> bool: ...

    @abstractmethod
    def enable(self) -> None: ...

    @abstractmethod
    def disable(self) -> None: ...

    @abstractmethod
    def get_volume(self) -> int: ...

    @abstractmethod
    def set_volume(self, percent: int) -> None: ...


class Tv(Device):
    def __init__(self):
        self._on = False
        self._volume = 30

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True

    def disable(self) -> None:
        self._on = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int) -> None:
        self._volume = clamp_volume(percent)

    def __str__(self) -> str:
        return f"Device: TV, Status: {'On' if self._on else 'Off'}, Volume: {self._volume}%"


class Radio(Device):
    def __init__(self):
        self._on = False
        self._volume = 15

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True

    def disable(self) -> None:
        self._on = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int) -> None:
        self._volume = clamp_volume(percent)

    def __str__(self) -> str:
        return f"Device: Radio, Status: {'On' if self._on else 'Off'}, Volume: {self._volume}%"


class RemoteControl:
    """Abstraction holding the bridge to a device."""

    def __init__(self, device: Device, output: Optional[OutputPort] = None):
        self._device = device
        self._output = resolve_output(output)

    def toggle_power(self) -> None:
        if self._device.is_enabled():
            self._device.disable()
            self._output.write("Remote: Power Off")
        else:
            self._device.enable()
            self._output.write("Remote: Power On")

    def volume_down(self) -> None:
        self._device.set_volume(self._device.get_volume() - VOLUME_STEP)
        self._output.write("Remote: Volume Down")

    def volume_up(self) -> None:
        self._device.set_volume(self._device.get_volume() + VOLUME_STEP)
        self._output.write("Remote: Volume Up")


class AdvancedRemoteControl(RemoteControl):
    """Refined abstraction; devices are untouched."""

    def __init__(self, device: Device, output: Optional[OutputPort] = None):
        super().__init__(device, output)
        self._last_volume = device.get_volume()

    def mute(self) -> None:
        self._output.write("Advanced Remote: Mute")
        self._last_volume = self._device.get_volume()
        self._device.set_volume(0)

    def unmute(self) -> None:
        self._output.write("Advanced Remote: Unmute")
        self._device.set_volume(self._last_volume)


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Bridge Pattern Demonstration ---")
    output.write("")

    tv = Tv()
    output.write("Testing Basic Remote with a TV:")
    basic_remote = RemoteControl(tv, output)
    basic_remote.toggle_power()
    basic_remote.volume_up()
    output.write(str(tv))

    output.write("")
    output.write("-------------------------------------")
    output.write("")

    radio = Radio()
    output.write("Testing Advanced Remote with a Radio:")
    advanced_remote = AdvancedRemoteControl(radio, output)
    advanced_remote.toggle_power()
    advanced_remote.volume_up()
    advanced_remote.mute()
    output.write(str(radio))

    output.write("")
    output.write("--- End of Demonstration ---")
