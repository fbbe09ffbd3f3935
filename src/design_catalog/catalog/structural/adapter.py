"""Adapter: plugging a third-party logger into the application's Logger contract."""
from abc import ABC, abstractmethod
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class Logger(ABC):
    """Target contract the client code expects."""

    @abstractmethod
    def log(self, message: str) -> None: ...

    @abstractmethod
    def log_error(self, error: str) -> None: ...


class AppLogger(Logger):
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def log(self, message: str) -> None:
        self._output.write(f"[AppLog] Info: {message}")

    def log_error(self, error: str) -> None:
        self._output.write(f"[AppLog] ERROR: {error}")


class ThirdPartyLogger:
    """Adaptee with an incompatible interface that cannot be changed."""

    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def write_log_entry(self, entry: str) -> None:
        self._output.write(f"--ThirdPartyLog-- Entry recorded: {entry}")


class LoggerAdapter(Logger):
    """Translates Logger calls into ThirdPartyLogger entries."""

    def __init__(self, third_party_logger: ThirdPartyLogger):
        self._third_party_logger = third_party_logger

    def log(self, message: str) -> None:
        self._third_party_logger.write_log_entry(f"[INFO] {message}")

    def log_error(self, error: str) -> None:
        self._third_party_logger.write_log_entry(f"[FATAL] {error}")


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Adapter Pattern Demonstration ---")
    output.write("")

    logger: Logger = AppLogger(output)
    logger.log("This is a standard log message.")
    logger.log_error("This is a standard error message.")

    output.write("")
    output.write("-------------------------------------")
    output.write("")

    logger = LoggerAdapter(ThirdPartyLogger(output))
    output.write("Using the LoggerAdapter to integrate the ThirdPartyLogger:")
    logger.log("This log will be handled by the third-party logger.")
    logger.log_error("This error will also be handled by the third-party logger.")

    output.write("")
    output.write("--- End of Demonstration ---")
