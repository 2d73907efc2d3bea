"""Shared error types for the JSON-RPC and tool layers."""

INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for JSON-RPC envelope failures."""

    code: int = INVALID_REQUEST


class InvalidRequestError(ProtocolError):
    """The request envelope is malformed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid Request: {detail}")


class MethodNotFoundError(ProtocolError):
    """The request names a method this server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__("Method not found")


class ToolError(Exception):
    """Base error for tool dispatch and execution failures.

    The string form is sent verbatim as the JSON-RPC error message.
    """

    code: int = INTERNAL_ERROR


class ToolNameRequiredError(ToolError):
    """``tools/call`` params carry no string ``name``."""

    def __init__(self) -> None:
        super().__init__("tool name required")


class ToolNotFoundError(ToolError):
    """Requested tool does not exist in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("tool not found")


class MissingArgumentError(ToolError):
    """A required tool argument is absent or not a string."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class ToolExecutionError(ToolError):
    """A tool failed after its arguments were accepted."""

    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        self.detail = detail
        super().__init__(detail)
