"""
CLI-specific formatting functions for human-readable output.

JSON and YAML render any payload; the table format renders catalog entries
with Rich and falls back to JSON for other payloads.
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "entries" in data:
        return format_entries_table(data["entries"])
    elif isinstance(data, dict) and data.get("entry"):
        return format_entries_table([data["entry"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_entries_table(entries: List[Dict[str, Any]]) -> str:
    """Format catalog entries as a Rich table."""
    if not entries:
        return "No entries found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Measure type", style="blue")
    table.add_column("Archived", style="yellow")

    for entry in entries:
        table.add_row(
            str(entry.get("id", "N/A")),
            str(entry.get("name", "N/A")),
            str(entry.get("measure_type", "N/A")),
            "yes" if entry.get("is_archive") else "no",
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()
