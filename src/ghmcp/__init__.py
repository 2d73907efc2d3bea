"""GitHub MCP server — GitHub repository tools over line-delimited JSON-RPC."""

from __future__ import annotations

__version__ = "0.1.0"
