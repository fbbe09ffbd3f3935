"""Facade: one call to start a movie night."""
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output

MOVIE_VOLUME = 5


class Amplifier:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def on(self) -> None:
        self._output.write("Amplifier: On")

    def set_volume(self, level: int) -> None:
        self._output.write(f"Amplifier: Volume set to {level}")

    def off(self) -> None:
        self._output.write("Amplifier: Off")


class DvdPlayer:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def on(self) -> None:
        self._output.write("DVD Player: On")

    def play(self, movie: str) -> None:
        self._output.write(f'DVD Player: Playing "{movie}"')

    def off(self) -> None:
        self._output.write("DVD Player: Off")


class Projector:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def on(self) -> None:
        self._output.write("Projector: On")

    def wide_screen_mode(self) -> None:
        self._output.write("Projector: Wide Screen Mode")

    def off(self) -> None:
        self._output.write("Projector: Off")


class HomeTheaterFacade:
    def __init__(self, amp: Amplifier, dvd: DvdPlayer, projector: Projector,
                 output: Optional[OutputPort] = None):
        self._amp = amp
        self._dvd = dvd
        self._projector = projector
        self._output = resolve_output(output)

    def watch_movie(self, movie: str) -> None:
        self._output.write("Get ready to watch a movie...")
        self._amp.on()
        self._amp.set_volume(MOVIE_VOLUME)
        self._projector.on()
        self._projector.wide_screen_mode()
        self._dvd.on()
        self._dvd.play(movie)

    def end_movie(self) -> None:
        self._output.write("Shutting movie theater down...")
        self._dvd.off()
        self._projector.off()
        self._amp.off()


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Facade Pattern Demonstration ---")
    output.write("")

    home_theater = HomeTheaterFacade(Amplifier(output), DvdPlayer(output), Projector(output), output)
    home_theater.watch_movie("Inception")

    output.write("")
    output.write("--- End of Demonstration ---")
