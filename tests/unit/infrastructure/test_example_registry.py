"""Tests for the example registry."""
import pytest

from design_catalog.domain.base.catalog import Category, ExampleRegistration
from design_catalog.domain.core.exceptions import ConfigurationError, ExampleNotFoundError
from design_catalog.infrastructure.registry.example_registry import ExampleRegistry, get_example_registry


def noop_runner(output=None):
    pass


class TestExampleRegistry:
    """Test registration and lookup of demonstrations."""

    def test_registry_is_singleton(self, example_registry):
        assert ExampleRegistry() is example_registry
        assert get_example_registry() is example_registry

    def test_register_and_lookup(self, example_registry):
        example_registry.register("oop.sample", noop_runner, title="Sample",
                                  category=Category.OOP, summary="A sample")

        assert example_registry.is_registered("oop.sample")
        registration = example_registry.get_registration("oop.sample")
        assert registration.title == "Sample"
        assert registration.category is Category.OOP
        assert example_registry.create_runner("oop.sample") is noop_runner

    def test_title_defaults_to_key(self, example_registry):
        example_registry.register("solid.sample", noop_runner, category="solid")
        registration = example_registry.get_registration("solid.sample")
        assert registration.title == "solid.sample"
        assert registration.category is Category.SOLID

    def test_duplicate_key_raises(self, example_registry):
        example_registry.register("oop.sample", noop_runner)
        with pytest.raises(ConfigurationError, match="already registered"):
            example_registry.register("oop.sample", noop_runner)

    def test_unknown_key_raises(self, example_registry):
        with pytest.raises(ExampleNotFoundError) as exc_info:
            example_registry.get_registration("oop.missing")
        assert exc_info.value.key == "oop.missing"

    def test_create_runner_unknown_key_raises(self, example_registry):
        with pytest.raises(ExampleNotFoundError):
            example_registry.create_runner("oop.missing")

    def test_list_examples_keeps_registration_order(self, example_registry):
        example_registry.register_example(ExampleRegistration(
            "structural.b", "B", Category.STRUCTURAL, "", noop_runner))
        example_registry.register_example(ExampleRegistration(
            "oop.a", "A", Category.OOP, "", noop_runner))
        example_registry.register_example(ExampleRegistration(
            "structural.c", "C", Category.STRUCTURAL, "", noop_runner))

        assert [r.key for r in example_registry.list_examples()] == ["structural.b", "oop.a", "structural.c"]
        assert [r.key for r in example_registry.list_examples(Category.STRUCTURAL)] == [
            "structural.b",
            "structural.c",
        ]
        assert example_registry.get_registered_keys() == ["structural.b", "oop.a", "structural.c"]

    def test_clear_registrations(self, example_registry):
        example_registry.register("oop.sample", noop_runner)
        example_registry.clear_registrations()
        assert example_registry.get_registered_keys() == []
