"""Base domain contracts - ports, capability tagging and catalog entries."""

from design_catalog.domain.base.capabilities import Capable, supports
from design_catalog.domain.base.catalog import Category, ExampleRegistration
from design_catalog.domain.base.ports import OutputPort

__all__ = ["Capable", "supports", "Category", "ExampleRegistration", "OutputPort"]
