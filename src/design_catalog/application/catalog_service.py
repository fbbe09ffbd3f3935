"""
Catalog Service - orchestrates listing and running demonstrations.

The service is the single seam between the outer surfaces (CLI, tests) and
the example registry. Every demonstration runs to completion before the next
one starts, under the error middleware, so a domain error in one never stops
the catalog unless stop_on_error is configured.
"""
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from design_catalog.config.schemas import CatalogConfig
from design_catalog.domain.base.catalog import Category, ExampleRegistration
from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output
from design_catalog.infrastructure.error import ErrorMiddleware
from design_catalog.infrastructure.logging.logger import get_logger
from design_catalog.infrastructure.registry.example_registry import (
    ExampleRegistry,
    get_example_registry,
)

logger = get_logger(__name__)


class RunReport(BaseModel):
    """Outcome of a catalog run."""

    executed: List[str] = Field(default_factory=list, description="Keys run, in order")
    failed: List[str] = Field(default_factory=list, description="Keys that reported a domain error")

    @property
    def succeeded(self) -> bool:
        return not self.failed


class CatalogService:
    """Lists, describes and runs registered demonstrations."""

    def __init__(self,
                 registry: Optional[ExampleRegistry] = None,
                 config: Optional[CatalogConfig] = None,
                 output: Optional[OutputPort] = None):
        self._registry = registry if registry is not None else get_example_registry()
        self._config = config if config is not None else CatalogConfig()
        self._output = resolve_output(output)
        self._middleware = ErrorMiddleware(self._output)

    def list_examples(self, category: Optional[Category] = None) -> List[Dict[str, Any]]:
        """Catalog entries as plain dicts, in registration order."""
        return [r.to_dict() for r in self._registry.list_examples(category)]

    def describe(self, key: str) -> Dict[str, Any]:
        """
        Describe one entry.

        Raises:
            ExampleNotFoundError: If the key is not registered
        """
        return self._registry.get_registration(key).to_dict()

    def run_example(self, key: str) -> bool:
        """
        Run one demonstration.

        Returns:
            False when the demonstration reported a domain error

        Raises:
            ExampleNotFoundError: If the key is not registered
        """
        return self._run(self._registry.get_registration(key))

    def run_examples(self, keys: Iterable[str]) -> RunReport:
        """
        Run demonstrations in the given order.

        All keys are resolved before anything runs, so an unknown key leaves
        the output untouched.
        """
        registrations = [self._registry.get_registration(key) for key in keys]
        return self._run_many(registrations)

    def run_all(self, category: Optional[Category] = None) -> RunReport:
        """Run every demonstration in the enabled categories."""
        enabled = set(self._config.categories)
        if category is not None:
            enabled &= {Category(category)}
        registrations = [r for r in self._registry.list_examples() if r.category in enabled]
        logger.info("Running catalog", categories=sorted(c.value for c in enabled),
                    count=len(registrations))
        return self._run_many(registrations)

    def _run_many(self, registrations: List[ExampleRegistration]) -> RunReport:
        report = RunReport()
        for registration in registrations:
            report.executed.append(registration.key)
            if not self._run(registration):
                report.failed.append(registration.key)
                if self._config.stop_on_error:
                    logger.info("Stopping catalog run after failure", key=registration.key)
                    break
        return report

    def _run(self, registration: ExampleRegistration) -> bool:
        self._write_header(registration)
        logger.debug("Running demonstration", key=registration.key)
        succeeded = self._middleware.run(registration.runner, self._output)
        logger.debug("Demonstration finished", key=registration.key, succeeded=succeeded)
        return succeeded

    def _write_header(self, registration: ExampleRegistration) -> None:
        width = self._config.separator_width
        if width:
            self._output.write("=" * width)
        self._output.write(f"[{registration.key}] {registration.title}")
        if width:
            self._output.write("=" * width)


def bootstrap_catalog(registry: Optional[ExampleRegistry] = None) -> ExampleRegistry:
    """Register every demonstration once and return the registry."""
    from design_catalog.catalog.registration import register_all_examples

    if registry is None:
        registry = get_example_registry()
    register_all_examples(registry)
    return registry
