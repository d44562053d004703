"""
CLI-specific formatting functions.

This module handles presentation formatting for the CLI, including:
- JSON and YAML output
- Rich tables for maze rooms and families
- Plain text output using the pre-rendered description when present
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

SIDE_COLUMNS = ["north", "south", "east", "west"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "text":
        return format_text_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and data.get("rendered"):
        return str(data["rendered"]).rstrip("\n")
    if isinstance(data, dict):
        return "\n".join(f"{key}: {value}" for key, value in data.items())
    return str(data)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "rooms" in data and isinstance(data["rooms"], list):
        return format_rooms_table(data["rooms"])
    elif isinstance(data, dict) and "factories" in data:
        return format_families_table(data)
    elif isinstance(data, dict):
        return _render_table(["Key", "Value"], [[str(k), str(v)] for k, v in data.items()
                                                 if k != "rendered"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_rooms_table(rooms: List[Dict[str, Any]]) -> str:
    """Format maze rooms as a table, one row per room."""
    if not rooms:
        return "No rooms found."

    headers = ["Room", "Kind"] + [side.capitalize() for side in SIDE_COLUMNS]
    rows = [
        [str(room.get("room_no")), str(room.get("kind"))]
        + [str(room.get(side)) for side in SIDE_COLUMNS]
        for room in rooms
    ]
    return _render_table(headers, rows)


def format_families_table(data: Dict[str, Any]) -> str:
    """Format registered factory and builder families as a table."""
    rows = [["factory", f["name"], f["description"]] for f in data.get("factories", [])]
    rows += [["builder", b["name"], b["description"]] for b in data.get("builders", [])]
    if not rows:
        return "No families found."
    return _render_table(["Kind", "Name", "Description"], rows)


def _render_table(headers: List[str], rows: List[List[str]]) -> str:
    """Render a Rich table and capture it as a string."""
    table = Table(show_header=True, header_style="bold magenta")
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*row)

    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
