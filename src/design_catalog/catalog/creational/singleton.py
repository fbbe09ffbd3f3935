"""Singleton: one application logger for the whole process.

The logger is never created on first access. It is created once by an
explicit initialize() call, guarded by the SingletonRegistry lock, read
through a single accessor, and its lifetime ends with shutdown(). The
application_logger_scope() context manager ties both ends together.
"""
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output
from design_catalog.infrastructure.patterns import SingletonRegistry, get_singleton


class ApplicationLogger:
    """Process-wide logger. Obtain it through instance(), not the constructor."""

    def __init__(self, output: OutputPort):
        self._output = output
        self._output.write("Logger instance created. (This should only happen once)")

    @classmethod
    def initialize(cls, output: Optional[OutputPort] = None) -> "ApplicationLogger":
        """Create the instance. Later calls return the existing one."""
        return SingletonRegistry.get_instance().initialize(cls, resolve_output(output))

    @classmethod
    def instance(cls) -> "ApplicationLogger":
        """The global access point."""
        return get_singleton(cls)

    @classmethod
    def shutdown(cls) -> None:
        SingletonRegistry.get_instance().reset(cls)

    def log(self, message: str) -> None:
        self._output.write(f"[LOG - {datetime.now():%H:%M:%S}] {message}")


@contextmanager
def application_logger_scope(output: Optional[OutputPort] = None) -> Iterator[ApplicationLogger]:
    """Initialize the logger for the duration of a block.

    A logger that already existed when the block started outlives it.
    """
    owns_instance = not SingletonRegistry.get_instance().is_initialized(ApplicationLogger)
    logger = ApplicationLogger.initialize(output)
    try:
        yield logger
    finally:
        if owns_instance:
            ApplicationLogger.shutdown()


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Singleton Pattern Demonstration ---")

    with application_logger_scope(output):
        logger1 = ApplicationLogger.instance()
        logger2 = ApplicationLogger.instance()

        if logger1 is logger2:
            output.write("logger1 and logger2 are the same instance. Singleton works!")
        else:
            output.write("Singleton failed: different instances were created.")

        logger1.log("User logged in.")
        logger2.log("Data saved to database.")

    output.write("-------------------------------------")
    output.write("")
