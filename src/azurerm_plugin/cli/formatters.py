"""
CLI-specific formatting functions for command output.

JSON and YAML output carry the full state, since it is meant to be stored.
Table output is for people and masks sensitive values.
"""

import json
from typing import Any, Dict, Iterable, List

import yaml

SENSITIVE_PLACEHOLDER = "(sensitive value)"


def format_output(data: Any, format_type: str, sensitive: Iterable[str] = ()) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data, sensitive)
    else:
        return json.dumps(data, indent=2, default=str)


def mask_sensitive(state: Dict[str, Any], sensitive: Iterable[str]) -> Dict[str, Any]:
    masked = dict(state)
    for name in sensitive:
        if masked.get(name) is not None:
            masked[name] = SENSITIVE_PLACEHOLDER
    return masked


def format_table_output(data: Any, sensitive: Iterable[str] = ()) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "registrations" in data:
        return format_registrations_table(data["registrations"])
    elif isinstance(data, dict) and "schema" not in data:
        return format_state_table(mask_sensitive(data, sensitive))
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def _render(table) -> str:
    from rich.console import Console

    console = Console(width=120, record=True)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_state_table(state: Dict[str, Any]) -> str:
    """Format one resource state as a field/value table."""
    from rich.table import Table

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green", overflow="fold")

    for field_name, value in state.items():
        if isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        table.add_row(field_name, "" if value is None else str(value))

    return _render(table)


def format_registrations_table(registrations: List[Dict[str, Any]]) -> str:
    """Format the registered resource types as a table."""
    if not registrations:
        return "No resource types registered."

    from rich.table import Table

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Type", style="cyan")
    table.add_column("Kind", style="blue")
    table.add_column("Deprecated", style="red")

    for registration in registrations:
        table.add_row(
            registration["type"],
            registration["kind"],
            "yes" if registration.get("deprecation_message") else "",
        )

    return _render(table)
