"""Catalog registration - same pattern as the other registries.

Every demonstration is registered under a stable dotted key. Registration is
idempotent, so bootstrapping twice leaves the registry unchanged.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

from design_catalog.domain.base.catalog import Category, ExampleRegistration, Runner
from design_catalog.infrastructure.logging.logger import get_logger

from .creational import abstract_factory, builder, factory_method, prototype, singleton
from .oop import abstraction, encapsulation, inheritance, polymorphism
from .solid.dependency_inversion import bad_design as dip_bad, good_design as dip_good
from .solid.interface_segregation import bad_design as isp_bad, good_design as isp_good
from .solid.liskov_substitution import bad_design as lsp_bad, good_design as lsp_good
from .solid.open_closed import bad_design as ocp_bad, good_design as ocp_good
from .solid.single_responsibility import bad_design as srp_bad, good_design as srp_good
from .structural import adapter, bridge, composite, decorator, facade, proxy

if TYPE_CHECKING:
    from design_catalog.infrastructure.registry.example_registry import ExampleRegistry

logger = get_logger(__name__)

# (key, title, category, summary, runner)
CATALOG: List[Tuple[str, str, Category, str, Runner]] = [
    ("oop.encapsulation", "Encapsulation", Category.OOP,
     "Bank account guarding its balance behind validated operations", encapsulation.run),
    ("oop.inheritance", "Inheritance", Category.OOP,
     "Dogs and cats sharing the default behaviour of an animal contract", inheritance.run),
    ("oop.polymorphism", "Polymorphism", Category.OOP,
     "Shapes drawn through one interface", polymorphism.run),
    ("oop.abstraction", "Abstraction", Category.OOP,
     "Vehicle fleet managed through contracts and capability tags", abstraction.run),

    ("solid.srp.bad", "Single Responsibility (violation)", Category.SOLID,
     "One user service validating, saving and emailing", srp_bad.run),
    ("solid.srp.good", "Single Responsibility", Category.SOLID,
     "Registration split into validator, repository and notifier", srp_good.run),
    ("solid.ocp.bad", "Open/Closed (violation)", Category.SOLID,
     "Report generator switching on a report type", ocp_bad.run),
    ("solid.ocp.good", "Open/Closed", Category.SOLID,
     "New report formats added as new generators", ocp_good.run),
    ("solid.lsp.bad", "Liskov Substitution (violation)", Category.SOLID,
     "A square that breaks rectangle expectations", lsp_bad.run),
    ("solid.lsp.good", "Liskov Substitution", Category.SOLID,
     "Rectangles and squares as independent shapes", lsp_good.run),
    ("solid.isp.bad", "Interface Segregation (violation)", Category.SOLID,
     "A simple printer forced to implement scan and fax", isp_bad.run),
    ("solid.isp.good", "Interface Segregation", Category.SOLID,
     "Small printer, scanner and fax contracts", isp_good.run),
    ("solid.dip.bad", "Dependency Inversion (violation)", Category.SOLID,
     "Notification service building its own email sender", dip_bad.run),
    ("solid.dip.good", "Dependency Inversion", Category.SOLID,
     "Notification service depending on an injected message sender", dip_good.run),

    ("creational.abstract_factory", "Abstract Factory", Category.CREATIONAL,
     "Windows and macOS widget families", abstract_factory.run),
    ("creational.builder", "Builder", Category.CREATIONAL,
     "Gaming and office computers assembled step by step", builder.run),
    ("creational.factory_method", "Factory Method", Category.CREATIONAL,
     "Road and sea logistics creating their own transport", factory_method.run),
    ("creational.prototype", "Prototype", Category.CREATIONAL,
     "Sales reports cloned instead of regenerated", prototype.run),
    ("creational.singleton", "Singleton", Category.CREATIONAL,
     "One application logger with an explicit lifetime", singleton.run),

    ("structural.adapter", "Adapter", Category.STRUCTURAL,
     "A third-party logger behind the application logger contract", adapter.run),
    ("structural.bridge", "Bridge", Category.STRUCTURAL,
     "Remote controls and devices varying independently", bridge.run),
    ("structural.composite", "Composite", Category.STRUCTURAL,
     "Files and directories displayed as one tree", composite.run),
    ("structural.decorator", "Decorator", Category.STRUCTURAL,
     "Coffee orders built from stacked add-ons", decorator.run),
    ("structural.facade", "Facade", Category.STRUCTURAL,
     "A home theater started with one call", facade.run),
    ("structural.proxy", "Proxy", Category.STRUCTURAL,
     "A protection proxy in front of a shared folder", proxy.run),
]


def register_all_examples(registry: Optional["ExampleRegistry"] = None) -> int:
    """
    Register every demonstration with the example registry.

    Keys that are already registered are skipped.

    Returns:
        Number of demonstrations newly registered
    """
    if registry is None:
        from design_catalog.infrastructure.registry.example_registry import get_example_registry

        registry = get_example_registry()

    registered = 0
    for key, title, category, summary, runner in CATALOG:
        if registry.is_registered(key):
            continue
        registry.register_example(ExampleRegistration(
            key=key, title=title, category=category, summary=summary, runner=runner,
        ))
        registered += 1

    logger.debug("Catalog registered", registered=registered, total=len(CATALOG))
    return registered
