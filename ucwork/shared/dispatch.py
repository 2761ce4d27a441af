"""
Fallible handler dispatch.

A fallible handler takes a ResponseWriter and a HandlerRequest, writes
its success response into the writer and returns None, or returns an
AppError and leaves the writer to be discarded. ``dispatch`` adapts such
a handler to a Starlette/FastAPI endpoint:

- the request body is read up front and the handler runs in the
  threadpool, so blocking store calls never stall the event loop;
- an AppError is logged with its cause and answered as plain text with
  the envelope's status and message, never the cause;
- exceptions the handler does not turn into an envelope propagate to the
  application's catch-all exception handler.
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Mapping, Optional

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from ucwork.domain.resources.errors import WriteError
from ucwork.shared.errors.envelope import AppError

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 200


@dataclass(frozen=True)
class HandlerRequest:
    """Transport-free view of an incoming request.

    Attributes:
        method: HTTP verb.
        path: Request path.
        path_params: Path parameters extracted by the router, as matched strings.
        body: Raw request body.
    """

    method: str
    path: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


class ResponseWriter:
    """Buffer a handler writes its success response into.

    Status defaults to 200 until ``write_status`` is called. Headers and
    status may be set in any order relative to ``write``; nothing reaches
    the client until the dispatcher builds the final response.
    """

    def __init__(self) -> None:
        self.status_code = DEFAULT_STATUS
        self.headers: dict[str, str] = {}
        self._chunks: list[bytes] = []

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def write_status(self, status_code: int) -> None:
        self.status_code = status_code

    def write(self, data: bytes) -> int:
        """Append ``data`` to the body and return the number of bytes written.

        Raises:
            WriteError: If ``data`` is not a bytes-like object.
        """
        if not isinstance(data, (bytes, bytearray)):
            raise WriteError(f"cannot write {type(data).__name__} to response body")
        self._chunks.append(bytes(data))
        return len(data)

    @property
    def body(self) -> bytes:
        return b"".join(self._chunks)

    def to_response(self) -> Response:
        """Build the Starlette response holding everything written so far."""
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
        )


FallibleHandler = Callable[[ResponseWriter, HandlerRequest], Optional[AppError]]


def error_response(error: AppError) -> Response:
    """Log an envelope and turn it into a plain-text HTTP error response."""
    logger.error(
        "Handler error: status code: %d, message: %s, underlying err: %r",
        error.status,
        error.message,
        error.cause,
    )
    return PlainTextResponse(error.message, status_code=error.status)


def dispatch(handler: FallibleHandler) -> Callable[[Request], Awaitable[Response]]:
    """Wrap a fallible handler into a FastAPI endpoint.

    Args:
        handler: The handler to run for each matching request.

    Returns:
        An async endpoint taking the Starlette request.
    """

    async def endpoint(request: Request) -> Response:
        handler_request = HandlerRequest(
            method=request.method,
            path=request.url.path,
            path_params={key: str(value) for key, value in request.path_params.items()},
            body=await request.body(),
        )
        writer = ResponseWriter()
        error = await run_in_threadpool(handler, writer, handler_request)
        if error is not None:
            return error_response(error)
        return writer.to_response()

    # FastAPI derives the operation id from the endpoint name.
    endpoint.__name__ = getattr(handler, "__name__", endpoint.__name__)
    return endpoint
