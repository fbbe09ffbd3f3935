"""Violation: every new report format means editing ReportGenerator."""
from enum import Enum
from typing import Optional

from design_catalog.domain.base.ports import OutputPort
from design_catalog.infrastructure.adapters.output import resolve_output


class ReportType(str, Enum):
    PDF = "pdf"
    CSV = "csv"


class ReportGenerator:
    def __init__(self, output: Optional[OutputPort] = None):
        self._output = resolve_output(output)

    def generate_report(self, report_type: ReportType) -> None:
        if report_type == ReportType.PDF:
            self._output.write("Generating PDF report...")
        elif report_type == ReportType.CSV:
            self._output.write("Generating CSV report...")
        # A JSON report needs another branch here.


def run(output: Optional[OutputPort] = None) -> None:
    output = resolve_output(output)
    output.write("--- Running Bad Design (Violating OCP) ---")
    generator = ReportGenerator(output)
    generator.generate_report(ReportType.PDF)
    generator.generate_report(ReportType.CSV)
    output.write("----------------------------------------")
    output.write("")
