"""Catalog entry types."""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from design_catalog.domain.base.ports import OutputPort


class Category(str, Enum):
    """Catalog sections."""
    OOP = "oop"
    SOLID = "solid"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


Runner = Callable[[Optional[OutputPort]], None]


@dataclass(frozen=True)
class ExampleRegistration:
    """A registered demonstration and its parameterless entry point."""
    key: str
    title: str
    category: Category
    summary: str
    runner: Runner

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "title": self.title,
            "category": self.category.value,
            "summary": self.summary,
        }

    def __repr__(self) -> str:
        return f"ExampleRegistration(key='{self.key}')"
