"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for pattern listings and demo results
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich import box
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_list(data["results"])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(renderable: Any) -> str:
    """Capture Rich output as a string."""
    console = Console(record=True, width=120, force_terminal=False, color_system=None)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get().rstrip("\n")


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format pattern metadata as a table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", box=box.SQUARE)
    table.add_column("Slug", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("slug", "N/A")),
            str(pattern.get("title", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("summary", "")),
        )
    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Format demo results as a table, one row per narration line."""
    if not results:
        return "No demos were run."

    table = Table(show_header=True, header_style="bold magenta", box=box.SQUARE)
    table.add_column("Pattern", style="cyan")
    table.add_column("Narration")
    table.add_column("Time (ms)", style="yellow", justify="right")

    for result in results:
        lines = result.get("lines", [])
        table.add_row(
            str(result.get("title", "N/A")),
            "\n".join(lines),
            f"{float(result.get('duration_ms', 0.0)):.2f}",
        )
    return _render(table)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format pattern metadata as a detailed list."""
    if not patterns:
        return "No patterns found."

    blocks = []
    for pattern in patterns:
        blocks.append("\n".join([
            f"Slug:     {pattern.get('slug', 'N/A')}",
            f"Title:    {pattern.get('title', 'N/A')}",
            f"Category: {pattern.get('category', 'N/A')}",
            f"Summary:  {pattern.get('summary', '')}",
        ]))
    return "\n\n".join(blocks)


def format_results_list(results: List[Dict]) -> str:
    """Format demo results as a detailed list."""
    if not results:
        return "No demos were run."

    blocks = []
    for result in results:
        header = f"{result.get('title', 'N/A')} ({result.get('category', 'N/A')})"
        body = [f"  {line}" for line in result.get("lines", [])]
        blocks.append("\n".join([header] + body))
    return "\n\n".join(blocks)


def format_text_output(data: Any) -> str:
    """Format pattern metadata as plain console text."""
    if isinstance(data, dict) and "patterns" in data:
        patterns = data["patterns"]
        if not patterns:
            return "No patterns found."
        width = max(len(str(p.get("slug", ""))) for p in patterns)
        return "\n".join(
            f"{str(p.get('slug', '')).ljust(width)}  {p.get('title', 'N/A')} ({p.get('category', 'N/A')})"
            for p in patterns
        )
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    else:
        return format_output(data, "yaml")
