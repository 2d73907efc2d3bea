"""Protocol layer — JSON-RPC envelope, dispatch and stdio transport."""

from ghmcp.protocol.dispatcher import JsonRpcDispatcher
from ghmcp.protocol.errors import (
    InvalidRequestError,
    MethodNotFoundError,
    MissingArgumentError,
    ProtocolError,
    ToolError,
    ToolExecutionError,
    ToolNameRequiredError,
    ToolNotFoundError,
)
from ghmcp.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    TextContent,
    ToolCallResult,
    ToolDef,
    ToolInputSchema,
    ToolProperty,
)
from ghmcp.protocol.provider import ToolProvider
from ghmcp.protocol.transport import StdioServer, parse_request

__all__ = [
    "InvalidRequestError",
    "JsonRpcDispatcher",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "MissingArgumentError",
    "ProtocolError",
    "StdioServer",
    "TextContent",
    "ToolCallResult",
    "ToolDef",
    "ToolError",
    "ToolExecutionError",
    "ToolInputSchema",
    "ToolNameRequiredError",
    "ToolNotFoundError",
    "ToolProperty",
    "ToolProvider",
    "parse_request",
]
