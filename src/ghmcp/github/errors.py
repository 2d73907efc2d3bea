"""Error raised when a GitHub REST call fails."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ghmcp.protocol.errors import ToolError

if TYPE_CHECKING:
    import httpx


class GitHubAPIError(ToolError):
    """A GitHub request failed on the network or with an HTTP error status.

    ``str(err)`` is reported to the caller verbatim; ``status_code`` is
    ``None`` for transport failures (DNS, connect, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> GitHubAPIError:
        """Build ``"<METHOD> <url>: <status> <message> [errors]"`` from *response*."""
        message = response.reason_phrase
        errors: object = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = str(body.get("message") or message)
            errors = body.get("errors")

        request = response.request
        text = f"{request.method} {request.url}: {response.status_code} {message}"
        if errors:
            text += f" {json.dumps(errors)}"
        return cls(text, status_code=response.status_code)
