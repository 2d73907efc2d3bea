"""``ghmcp serve`` — run the JSON-RPC server on stdin/stdout."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.markup import escape

from ghmcp.cli_commands._output import console

if TYPE_CHECKING:
    from ghmcp.config import ServerConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML config file (defaults to environment variables only).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level for stderr logging (overrides config).",
)
@click.option("--otlp-endpoint", default=None, help="Export traces via OTLP/gRPC to this endpoint.")
def serve(config_path: str | None, log_level: str | None, otlp_endpoint: str | None) -> None:
    """Serve GitHub tools over line-delimited JSON-RPC on stdio.

    Requires GITHUB_TOKEN (or a config file providing ``token``).
    """
    from ghmcp.config import ConfigError, ServerConfig, load_config

    try:
        config = load_config(Path(config_path)) if config_path else ServerConfig.from_env()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(1)

    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        stream=sys.stderr,
        format=_LOG_FORMAT,
    )

    if otlp_endpoint:
        from ghmcp.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(service_name="ghmcp", otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            console.print(f"[red]Telemetry error:[/red] {escape(str(exc))}")
            sys.exit(1)

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logging.getLogger(__name__).debug("Interrupted")


async def run_server(config: ServerConfig) -> None:
    """Build the client, dispatcher and transport, then serve until EOF."""
    from ghmcp.github.client import GitHubClient
    from ghmcp.protocol.dispatcher import JsonRpcDispatcher
    from ghmcp.protocol.transport import StdioServer
    from ghmcp.tools.provider import GitHubTools

    async with GitHubClient.from_config(config) as github:
        dispatcher = JsonRpcDispatcher(GitHubTools(github))
        await StdioServer(dispatcher).serve_forever()
