"""JsonRpcDispatcher — validates the JSON-RPC envelope and routes by method.

Every request yields exactly one :class:`JsonRpcResponse`; failures are
captured as error payloads and never raised to the transport.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ghmcp import __version__
from ghmcp.protocol.errors import (
    INTERNAL_ERROR,
    InvalidRequestError,
    MethodNotFoundError,
    ProtocolError,
    ToolError,
    ToolNameRequiredError,
)
from ghmcp.protocol.models import JSONRPC_VERSION, JsonRpcResponse, ToolCallResult
from ghmcp.utils.telemetry import ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ghmcp.protocol.models import JsonRpcRequest
    from ghmcp.protocol.provider import ToolProvider

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

MCP_PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "github-mcp"


class JsonRpcDispatcher:
    """Routes ``initialize``, ``initialized``, ``tools/list`` and ``tools/call``.

    Usage::

        dispatcher = JsonRpcDispatcher(GitHubTools(client))
        response = await dispatcher.handle(request)
    """

    def __init__(
        self,
        provider: ToolProvider,
        *,
        server_name: str = SERVER_NAME,
        server_version: str = __version__,
    ) -> None:
        self._provider = provider
        self._server_info = {"name": server_name, "version": server_version}
        self._methods: dict[str, Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]] = {
            "initialize": self._initialize,
            "initialized": self._initialized,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    async def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Produce the response for *request*; never raises."""
        request_id = 0 if request.id is None else request.id
        try:
            result = await self._route(request)
        except (ProtocolError, ToolError) as exc:
            logger.debug("%s failed: %s", request.method or "<none>", exc)
            return JsonRpcResponse.failure(request_id, exc.code, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while handling %s", request.method)
            return JsonRpcResponse.failure(request_id, INTERNAL_ERROR, str(exc))
        return JsonRpcResponse.success(request_id, result)

    async def _route(self, request: JsonRpcRequest) -> dict[str, Any]:
        if request.jsonrpc != JSONRPC_VERSION:
            raise InvalidRequestError("jsonrpc must be '2.0'")
        if not request.method:
            raise InvalidRequestError("method is required")

        handler = self._methods.get(request.method)
        if handler is None:
            raise MethodNotFoundError(request.method)

        logger.debug("Dispatching %s (id=%r)", request.method, request.id)
        return await handler(request.params or {})

    async def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": MCP_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": dict(self._server_info),
        }

    async def _initialized(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    async def _tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": [tool.to_wire() for tool in self._provider.list_tools()]}

    async def _tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str):
            raise ToolNameRequiredError()

        arguments = params.get("arguments")
        if not isinstance(arguments, dict):
            arguments = {}

        with _tracer.start_as_current_span("ghmcp.tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            text = await self._provider.call_tool(name, arguments)

        return ToolCallResult.from_text(text).model_dump()
