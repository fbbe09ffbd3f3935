"""Error handling infrastructure package."""

from design_catalog.infrastructure.error.error_middleware import (
    ErrorMiddleware,
    with_error_handling,
)

__all__ = ["ErrorMiddleware", "with_error_handling"]
