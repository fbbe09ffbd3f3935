"""Example Registry - maps catalog keys to demonstration entry points."""
from typing import List, Optional

from design_catalog.domain.base.catalog import Category, ExampleRegistration, Runner
from design_catalog.infrastructure.registry.base_registry import BaseRegistry


class ExampleRegistry(BaseRegistry):
    """Registry for catalog demonstrations."""

    def register(self, key: str, runner: Runner, title: str = "",
                 category: Category = Category.OOP, summary: str = "") -> None:
        """Register a demonstration - implements abstract method."""
        self.register_example(ExampleRegistration(
            key=key,
            title=title or key,
            category=Category(category),
            summary=summary,
            runner=runner,
        ))

    def register_example(self, registration: ExampleRegistration) -> None:
        self._add_registration(registration.key, registration)

    def list_examples(self, category: Optional[Category] = None) -> List[ExampleRegistration]:
        """List registrations, optionally restricted to one category."""
        registrations = [self.get_registration(key) for key in self.get_registered_keys()]
        if category is None:
            return registrations
        return [r for r in registrations if r.category == Category(category)]

    def create_runner(self, key: str) -> Runner:
        """Get the entry point registered under a key."""
        return self.get_registration(key).runner


def get_example_registry() -> ExampleRegistry:
    """Get the singleton example registry instance."""
    return ExampleRegistry()
