"""Design Catalog - Root Package.

A catalog of small, self-contained demonstrations of object-oriented
principles, SOLID principles and Gang-of-Four design patterns.

Every demonstration follows the same shape: a capability contract, one or
more variants implementing it, and a composition root that builds the
variants and drives them only through the contract.

Key Components:
    - domain: Contracts, ports and exceptions shared by every example
    - infrastructure: Output adapters, registries, singleton support, logging
    - config: Application configuration schemas and manager
    - application: Catalog service that lists and runs demonstrations
    - catalog: The demonstrations themselves
    - cli: Command line interface

Usage:
    >>> design-catalog list --format table
    >>> design-catalog run structural.decorator
    >>> design-catalog run --all --category solid
"""

from ._version import __version__

__package_name__ = "design-catalog"
