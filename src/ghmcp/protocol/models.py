"""MCP models — JSON-RPC 2.0 messages, tool descriptors and tool results.

Implements the message format the server speaks on stdio for the handshake
(``initialize``), tool discovery (``tools/list``) and execution
(``tools/call``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

JSONRPC_VERSION = "2.0"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request as read from the wire.

    Fields are optional so that envelope problems (wrong version, empty
    method) reach the dispatcher and produce an error response. Wrong *types*
    fail validation and the line is dropped by the transport.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = ""
    id: Any = None
    method: str = ""
    params: dict[str, Any] | None = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message carrying a result or an error."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = 0
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _result_xor_error(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of result or error"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, id: Any, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: Any, code: int, message: str) -> JsonRpcResponse:
        return cls(id=id, error=JsonRpcError(code=code, message=message))

    def to_wire(self) -> dict[str, Any]:
        """Return the dict written to stdout (``data`` omitted when unset)."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolProperty(BaseModel):
    """One named argument in a tool's input schema."""

    type: Literal["string", "boolean"]
    description: str


class ToolInputSchema(BaseModel):
    """JSON Schema (object type) describing a tool's arguments."""

    type: Literal["object"] = "object"
    properties: dict[str, ToolProperty] = {}
    required: list[str] | None = None


class ToolDef(BaseModel):
    """A tool descriptor as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: ToolInputSchema = Field(default_factory=ToolInputSchema, alias="inputSchema")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """The ``result`` of a successful ``tools/call``."""

    content: list[TextContent] = []

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        """Create a result with a single text content part."""
        return cls(content=[TextContent(text=text)])
