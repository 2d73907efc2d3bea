"""Shared CLI output formatters.

``console`` writes to stderr: while serving, stdout belongs to the JSON-RPC
stream. ``out`` is for commands whose product is their stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from ghmcp.protocol.models import ToolDef

console = Console(stderr=True)
out = Console()


def print_tools_table(tools: list[ToolDef]) -> None:
    """Pretty-print the tool catalog as a table."""
    table = Table(title="GitHub Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = ", ".join(tool.input_schema.required or []) or "-"
        table.add_row(tool.name, _truncate(tool.description), required)

    out.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
