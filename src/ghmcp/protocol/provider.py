"""ToolProvider protocol — what the dispatcher needs from a tool backend.

The :class:`~ghmcp.protocol.dispatcher.JsonRpcDispatcher` routes
``tools/list`` and ``tools/call`` through this interface without knowing
which remote service backs the tools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ghmcp.protocol.models import ToolDef


@runtime_checkable
class ToolProvider(Protocol):
    """Lists and executes a fixed set of tools."""

    def list_tools(self) -> list[ToolDef]:
        """Return the static tool catalog."""
        ...

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> str:
        """Execute a tool by name and return its text output.

        Raises:
            ToolError: On unknown tools, invalid arguments or remote failures.
        """
        ...
