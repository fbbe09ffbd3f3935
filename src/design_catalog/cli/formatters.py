"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for catalog listings
- Detailed list views
- JSON and YAML dumps for scripting
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

TABLE_WIDTH = 120


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def _as_rows(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, dict):
        return [data]
    return list(data)


def _cell(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return "\n".join(str(item) for item in value)
    return str(value)


def _heading(field: str) -> str:
    return field.replace("_", " ").title()


def format_table_output(data: Any) -> str:
    """Format a mapping or a list of mappings as a table."""
    rows = _as_rows(data)
    if not rows:
        return "No examples found."

    columns = list(rows[0])
    table = Table(show_header=True, header_style="bold magenta")
    for index, column in enumerate(columns):
        # Keep the first column (the key) on one line
        table.add_column(_heading(column), no_wrap=index == 0)
    for row in rows:
        table.add_row(*(_cell(row.get(column, "")) for column in columns))

    console = Console(width=TABLE_WIDTH, legacy_windows=False, force_terminal=False, color_system=None)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")


def format_list_output(data: Any) -> str:
    """Format a mapping or a list of mappings as a detailed list."""
    rows = _as_rows(data)
    if not rows:
        return "No examples found."

    lines: List[str] = []
    for i, row in enumerate(rows):
        if i > 0:
            lines.append("")  # Blank line between entries

        for position, (field, value) in enumerate(row.items()):
            indent = "" if position == 0 else "  "
            if isinstance(value, (list, tuple)):
                lines.append(f"{indent}{_heading(field)}:")
                lines.extend(f"{indent}    {item}" for item in value)
            else:
                lines.append(f"{indent}{_heading(field)}: {value}")

    return "\n".join(lines)
