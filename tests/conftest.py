"""Shared fixtures for the design catalog test suite."""
import logging

import pytest

from design_catalog.config.manager import CONFIG_FILE_ENV, ENV_OVERRIDES
from design_catalog.infrastructure.adapters.output import BufferedOutput
from design_catalog.infrastructure.patterns import SingletonRegistry
from design_catalog.infrastructure.registry.example_registry import ExampleRegistry


@pytest.fixture
def output():
    """In-memory sink that collects demonstration output."""
    return BufferedOutput()


@pytest.fixture
def example_registry():
    """The example registry singleton, emptied before and after the test."""
    registry = ExampleRegistry()
    registry.clear_registrations()
    yield registry
    registry.clear_registrations()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts and ends without live singletons."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables from leaking into tests."""
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any handler changes setup_logging() makes to the root logger."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
