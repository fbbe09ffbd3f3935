"""Capability tagging for variants that satisfy optional secondary contracts.

A variant declares the capabilities it supports once, when it is constructed.
Composition roots ask ``supports(variant, capability)`` instead of inspecting
the variant's runtime type.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet


class Capable(ABC):
    """Contract for variants that carry a fixed capability set."""

    @property
    @abstractmethod
    def capabilities(self) -> FrozenSet[Enum]:
        """Capabilities fixed at construction time."""


def supports(variant: Capable, capability: Enum) -> bool:
    """Check whether a variant was tagged with the given capability."""
    return capability in variant.capabilities
