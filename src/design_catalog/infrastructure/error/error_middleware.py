"""Error handling middleware for demonstration runs."""

import functools
from typing import Any, Callable, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.domain.core.exceptions import DomainException
from design_catalog.infrastructure.adapters.output import resolve_output
from design_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ErrorMiddleware:
    """
    Middleware for consistent error handling around demonstrations.

    A DomainException escaping a demonstration is logged and reported as a
    single output line, and the caller carries on with the next one. Any
    other exception is a programming error and propagates.
    """

    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def wrap(self, func: Callable[..., Any]) -> Callable[..., bool]:
        """
        Wrap a function with error handling.

        Args:
            func: The function to wrap

        Returns:
            Wrapped function returning True on success, False when a domain
            error was reported
        """

        @functools.wraps(func)
        def wrapped(*args: Any, **kwargs: Any) -> bool:
            try:
                func(*args, **kwargs)
                return True
            except DomainException as e:
                logger.warning(
                    "Demonstration failed",
                    function=getattr(func, "__qualname__", repr(func)),
                    error_type=type(e).__name__,
                    error=str(e),
                )
                self._output.write(f"Error: {e}")
                return False

        return wrapped

    def run(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """Run a function under error handling."""
        return self.wrap(func)(*args, **kwargs)


def with_error_handling(output: Optional[OutputPort] = None):
    """
    Decorator for adding error handling to functions.

    Args:
        output: Where to report domain errors

    Returns:
        Decorator function
    """
    middleware = ErrorMiddleware(output)

    def decorator(func: Callable[..., Any]) -> Callable[..., bool]:
        return middleware.wrap(func)

    return decorator
