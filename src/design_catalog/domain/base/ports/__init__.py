"""Domain ports."""

from design_catalog.domain.base.ports.output_port import OutputPort

__all__ = ["OutputPort"]
