"""Core domain definitions."""

from design_catalog.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    ExampleNotFoundError,
    SingletonNotInitializedError,
    UnsupportedOperationError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "UnsupportedOperationError",
    "ConfigurationError",
    "ExampleNotFoundError",
    "SingletonNotInitializedError",
]
