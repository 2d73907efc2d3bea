"""``ghmcp tools`` — show the static tool catalog."""

from __future__ import annotations

import json

import click

from ghmcp.cli_commands._output import out, print_tools_table


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as tools/list JSON.")
def tools(as_json: bool) -> None:
    """List the tools this server exposes (no token needed)."""
    from ghmcp.tools.catalog import TOOL_CATALOG

    catalog = list(TOOL_CATALOG)
    if as_json:
        payload = {"tools": [tool.to_wire() for tool in catalog]}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print_tools_table(catalog)
