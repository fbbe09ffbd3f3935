"""Adherence: new report formats are new classes, nothing existing changes."""
from abc import ABC, abstractmethod
from typing import List, Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class ReportGenerator(ABC):
    @abstractmethod
    def generate(self) -> str:
        """Generate the report and describe what was produced."""


class PdfReportGenerator(ReportGenerator):
    def generate(self) -> str:
        return "Generating PDF report..."


class CsvReportGenerator(ReportGenerator):
    def generate(self) -> str:
        return "Generating CSV report..."


class JsonReportGenerator(ReportGenerator):
    def generate(self) -> str:
        return "Generating JSON report..."


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Good Design (Adhering to OCP) ---")

    generators: List[ReportGenerator] = [
        PdfReportGenerator(),
        CsvReportGenerator(),
        JsonReportGenerator(),
    ]
    for generator in generators:
        output.write(generator.generate())

    output.write("-----------------------------------------")
    output.write("")
