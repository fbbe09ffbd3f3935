"""Registry package - keyed registrations for catalog demonstrations."""

from design_catalog.infrastructure.registry.base_registry import BaseRegistry
from design_catalog.infrastructure.registry.example_registry import (
    ExampleRegistry,
    get_example_registry,
)

__all__ = ["BaseRegistry", "ExampleRegistry", "get_example_registry"]
