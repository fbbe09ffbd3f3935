"""Domain exceptions shared across the catalog."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when a value violates a precondition of a variant."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnsupportedOperationError(DomainException):
    """Raised by a variant forced to implement an operation it cannot honour."""
    def __init__(self, operation: str, message: Optional[str] = None):
        super().__init__(message or f"{operation} is not supported")
        self.operation = operation


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExampleNotFoundError(DomainException):
    """Raised when a demonstration key is not registered."""
    def __init__(self, key: str):
        super().__init__(f"Example '{key}' is not registered")
        self.key = key


class SingletonNotInitializedError(DomainException):
    """Raised when a singleton is accessed before its initialization."""
    def __init__(self, name: str):
        super().__init__(f"Singleton {name} has not been initialized")
        self.name = name
