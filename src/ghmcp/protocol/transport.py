"""Stdio transport — newline-delimited JSON-RPC over stdin/stdout.

Lines are handled strictly one at a time: the next line is not read until
the previous response has been written. Lines that are not a JSON request
object are dropped without a reply.
"""

from __future__ import annotations

import asyncio
import json
import logging
import math
import sys
from typing import TYPE_CHECKING, TextIO

from pydantic import ValidationError

from ghmcp.protocol.models import JsonRpcRequest

if TYPE_CHECKING:
    from ghmcp.protocol.dispatcher import JsonRpcDispatcher

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        msg = f"number out of range: {text}"
        raise ValueError(msg)
    return value


def parse_request(line: str) -> JsonRpcRequest | None:
    """Parse one input line, or return ``None`` if it is not a request object.

    Strict JSON only: ``NaN``, ``Infinity`` and numbers that overflow a
    double are rejected. A bare ``null`` decodes to an empty request, which
    the dispatcher answers with an envelope error.
    """
    try:
        data = json.loads(line, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError:
        return None
    if data is None:
        data = {}
    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError:
        return None


def encode_response(payload: dict[str, object]) -> str:
    """Serialize a response as a single compact line (no trailing newline)."""
    return json.dumps(payload, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


class StdioServer:
    """Reads requests from *stdin* and writes responses to *stdout*.

    The streams default to the process's standard streams, resolved when the
    server is constructed.
    """

    def __init__(
        self,
        dispatcher: JsonRpcDispatcher,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.dropped_lines = 0

    async def serve_forever(self) -> None:
        """Process lines until *stdin* reaches EOF."""
        logger.debug("Serving JSON-RPC on stdio")
        while True:
            raw = await asyncio.to_thread(self._stdin.readline)
            if not raw:
                break
            await self.handle_line(raw)
        logger.debug("stdin closed, shutting down")

    async def handle_line(self, raw: str) -> str | None:
        """Handle one raw input line; return the written output line, if any."""
        line = raw.strip()
        if not line:
            return None

        request = parse_request(line)
        if request is None:
            self.dropped_lines += 1
            logger.debug("Dropping unparsable line: %s", line[:200])
            return None

        response = await self._dispatcher.handle(request)
        try:
            output = encode_response(response.to_wire())
        except (TypeError, ValueError):
            logger.warning("Could not serialize response for id %r", response.id, exc_info=True)
            return None

        self._stdout.write(output + "\n")
        self._stdout.flush()
        return output
