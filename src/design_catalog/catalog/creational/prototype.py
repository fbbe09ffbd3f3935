"""Prototype: cheap copies of an expensive report.

Building a SalesReport is costly, cloning one is not. clone() is an explicit
copy: plain fields are copied as they are, and the line items the report
owns are deep-copied so the clone and the original never share them.
"""
import copy
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class DocumentPrototype(ABC):
    @abstractmethod
    def clone(self) -> "DocumentPrototype": ...

    @abstractmethod
    def display(self) -> None: ...


class SalesReport(DocumentPrototype):
    def __init__(self, title: str, report_data: str, line_items: Optional[List[dict]] = None,
                 output: Optional[OutputPort] = None):
        self._output = resolve_output(output)
        self._output.write("Generating initial sales report (expensive operation)...")
        self.title = title
        self.report_data = report_data
        self.line_items: List[dict] = list(line_items or [])
        self._created_at = datetime.now()

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def clone(self) -> "SalesReport":
        self._output.write(f"Cloning report: '{self.title}'...")
        twin = SalesReport.__new__(SalesReport)
        twin._output = self._output
        twin.title = self.title
        twin.report_data = self.report_data
        twin._created_at = self._created_at
        twin.line_items = copy.deepcopy(self.line_items)
        return twin

    def display(self) -> None:
        self._output.write(f"--- Document: {self.title} ---")
        self._output.write(f"Created At: {self._created_at:%Y-%m-%d %H:%M:%S}")
        self._output.write(f"Report Data: {self.report_data}")
        self._output.write("--------------------------")


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Prototype Pattern Demonstration ---")

    original_report = SalesReport(
        "Q1 Sales Report",
        "Data for Q1...",
        line_items=[{"region": "North", "total": 1200}],
        output=output,
    )
    original_report.display()

    output.write("")
    output.write("-------------------------------------")
    output.write("")

    cloned_report = original_report.clone()
    cloned_report.title = "Q2 Sales Report (from Q1 template)"
    cloned_report.report_data = "Data for Q2..."
    cloned_report.line_items[0]["total"] = 1500

    output.write("Displaying original and cloned reports to show they are separate instances:")
    output.write("")

    output.write("Original:")
    original_report.display()

    output.write("Cloned and Modified:")
    cloned_report.display()

    output.write("-------------------------------------")
    output.write("")
