"""ghmcp CLI entrypoint."""

from __future__ import annotations

import click

from ghmcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="ghmcp")
def main() -> None:
    """ghmcp — GitHub tools for agents over JSON-RPC on stdio."""


# Register subcommands
from ghmcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
