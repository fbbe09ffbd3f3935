"""Output adapters."""

from design_catalog.infrastructure.adapters.output import (
    BufferedOutput,
    ConsoleOutput,
    resolve_output,
)

__all__ = ["BufferedOutput", "ConsoleOutput", "resolve_output"]
