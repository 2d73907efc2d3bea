"""GitHub tools — the static catalog and the handlers behind ``tools/call``."""

from ghmcp.tools.catalog import TOOL_CATALOG, TOOL_NAMES
from ghmcp.tools.provider import GitHubTools

__all__ = ["TOOL_CATALOG", "TOOL_NAMES", "GitHubTools"]
