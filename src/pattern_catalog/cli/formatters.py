"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Rich tables for demo listings and details
- List formatting for detailed views
- Verbatim demo output for run results

Data handed to ``format_output`` is plain dicts built from the catalogue
value objects, keyed by ``demos``, ``demo`` or ``results``.
"""
import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demo_table(data["demo"])
    elif isinstance(data, dict) and "results" in data:
        return format_run_results(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demo_list(data["demo"])
    elif isinstance(data, dict) and "results" in data:
        return format_run_results(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_table(demos: List[Dict]) -> str:
    """Format demos as a table using Rich."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for demo in demos:
        table.add_row(
            str(demo.get("name", "N/A")),
            str(demo.get("title", "N/A")),
            str(demo.get("category", "N/A")),
            str(demo.get("summary", "")),
        )

    return _render(table)


def format_demo_table(demo: Dict) -> str:
    """Format a single demo as a two-column field table, followed by its notes."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for field in ("name", "title", "category", "module", "summary"):
        table.add_row(field.capitalize(), str(demo.get(field, "N/A")))

    output = _render(table)
    notes = demo.get("notes")
    if notes:
        output += "\n" + notes + "\n"
    return output


def format_demos_list(demos: List[Dict]) -> str:
    """Format demos as a detailed list."""
    if not demos:
        return "No demos found."

    lines = []

    for i, demo in enumerate(demos):
        if i > 0:
            lines.append("")  # Blank line between demos

        lines.append(f"Demo: {demo.get('name', 'N/A')}")
        lines.append(f"  Title: {demo.get('title', 'N/A')}")
        lines.append(f"  Category: {demo.get('category', 'N/A')}")
        lines.append(f"  Summary: {demo.get('summary', '')}")

    return "\n".join(lines)


def format_demo_list(demo: Dict) -> str:
    """Format a single demo as a detailed list."""
    lines = [
        f"Demo: {demo.get('name', 'N/A')}",
        f"  Title: {demo.get('title', 'N/A')}",
        f"  Category: {demo.get('category', 'N/A')}",
        f"  Module: {demo.get('module', 'N/A')}",
        f"  Summary: {demo.get('summary', '')}",
    ]
    notes = demo.get("notes")
    if notes:
        lines.append("")
        lines.append(notes)
    return "\n".join(lines)


def format_run_results(results: List[Dict]) -> str:
    """
    Format run results as the demos' own output.

    A single result is printed verbatim. Several results are separated by a
    ``==== name ====`` banner. Failures append an ``Error:`` line.
    """
    if not results:
        return "No demos run."

    blocks = []
    for result in results:
        lines: List[str] = []
        if len(results) > 1:
            lines.append(f"==== {result.get('name', 'N/A')} ====")
        lines.extend(result.get("output_lines", []))
        if not result.get("success", True):
            lines.append(f"Error: {result.get('error')}")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks)
