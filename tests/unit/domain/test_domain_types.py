"""Tests for domain exceptions, capability tagging and catalog entry types."""
import dataclasses
from enum import Enum

import pytest

from design_catalog.domain.base.capabilities import Capable, supports
from design_catalog.domain.base.catalog import Category, ExampleRegistration
from design_catalog.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    ExampleNotFoundError,
    SingletonNotInitializedError,
    UnsupportedOperationError,
    ValidationError,
)


class TestDomainExceptions:
    """Test the domain exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad value"),
            UnsupportedOperationError("scan"),
            ConfigurationError("bad config"),
            ExampleNotFoundError("oop.missing"),
            SingletonNotInitializedError("Logger"),
        ],
    )
    def test_all_errors_are_domain_exceptions(self, error):
        assert isinstance(error, DomainException)

    def test_validation_error_keeps_details(self):
        error = ValidationError("Initial balance cannot be negative", details="-5")
        assert str(error) == "Initial balance cannot be negative"
        assert error.details == "-5"

    def test_unsupported_operation_default_message(self):
        error = UnsupportedOperationError("fax")
        assert str(error) == "fax is not supported"
        assert error.operation == "fax"

    def test_unsupported_operation_custom_message(self):
        error = UnsupportedOperationError("scan", "Scan functionality is not supported.")
        assert str(error) == "Scan functionality is not supported."

    def test_configuration_error_missing_fields_default(self):
        assert ConfigurationError("oops").missing_fields == []
        assert ConfigurationError("oops", ["level"]).missing_fields == ["level"]

    def test_example_not_found_message(self):
        error = ExampleNotFoundError("oop.missing")
        assert str(error) == "Example 'oop.missing' is not registered"
        assert error.key == "oop.missing"

    def test_singleton_not_initialized_message(self):
        assert str(SingletonNotInitializedError("Logger")) == "Singleton Logger has not been initialized"


class Feature(Enum):
    FAST = "fast"
    SAFE = "safe"


class Tagged(Capable):
    def __init__(self, *features):
        self._features = frozenset(features)

    @property
    def capabilities(self):
        return self._features


class TestCapabilities:
    """Test capability tagging."""

    def test_supports_tagged_capability(self):
        variant = Tagged(Feature.FAST)
        assert supports(variant, Feature.FAST)
        assert not supports(variant, Feature.SAFE)

    def test_untagged_variant_supports_nothing(self):
        assert not supports(Tagged(), Feature.FAST)

    def test_capable_requires_capabilities(self):
        with pytest.raises(TypeError):
            Capable()


class TestExampleRegistration:
    """Test the catalog entry type."""

    def setup_method(self):
        self.registration = ExampleRegistration(
            key="oop.sample",
            title="Sample",
            category=Category.OOP,
            summary="A sample entry",
            runner=lambda output=None: None,
        )

    def test_to_dict_excludes_runner(self):
        assert self.registration.to_dict() == {
            "key": "oop.sample",
            "title": "Sample",
            "category": "oop",
            "summary": "A sample entry",
        }

    def test_registration_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.registration.key = "other"

    def test_category_is_string_enum(self):
        assert Category("structural") is Category.STRUCTURAL
        assert Category.SOLID == "solid"
