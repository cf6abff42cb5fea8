"""Envelope interpretation for Habitify API responses.

Every Habitify response body is wrapped as
``{"message": ..., "data": ..., "version": ..., "status": bool}``. The
EnvelopeInterpreter is installed as ``httpx`` event hooks on the client's
single ``httpx.AsyncClient`` so that no request, including multipart uploads,
bypasses the check. A false ``status`` is a failure whatever the HTTP status
code says.
"""

import contextlib
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from habitify_client.api.exceptions import HabitifyAPIError, HabitifyTransportError
from habitify_client.api.models import Envelope
from habitify_client.api.protocols import HabitifyLogger

_MAX_LOGGED_BODY = 2000
_REDACTED = "***redacted***"
_RESULT_KEY = "habitify.data"

EventHook = Callable[..., Awaitable[None]]


def parse_envelope(response: httpx.Response) -> Envelope | None:
    """Return the response envelope, or None when the body carries none.

    A body counts as an envelope when it is a JSON object whose ``status``
    member is a boolean. ``message`` and ``version`` are kept only when they
    are strings; their types never decide whether the body is an envelope.
    """
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict) or not isinstance(body.get("status"), bool):
        return None

    message = body.get("message")
    version = body.get("version")
    return Envelope(
        message=message if isinstance(message, str) else None,
        data=body.get("data"),
        version=version if isinstance(version, str) else None,
        status=body["status"],
    )


def redact_headers(headers: httpx.Headers) -> dict[str, str]:
    """Return request headers with the ``Authorization`` value masked."""
    return {
        name: _REDACTED if name.lower() == "authorization" else value
        for name, value in headers.items()
    }


def _describe_request_body(request: httpx.Request) -> str:
    """Render a request body for debug logging without consuming streams."""
    content_type = request.headers.get("Content-Type", "")
    if content_type.startswith("multipart/"):
        return "<multipart>"
    try:
        content = request.content
    except httpx.RequestNotRead:
        return "<stream>"
    return content.decode("utf-8", errors="replace")[:_MAX_LOGGED_BODY]


class EnvelopeInterpreter:
    """Request/response interception pipeline for the Habitify API.

    Logging goes through the configured sink and never raises: a failing
    sink cannot change the outcome of a call.
    """

    def __init__(self, logger: HabitifyLogger) -> None:
        """Initialize the interpreter.

        Args:
            logger: Sink receiving debug records for every exchange and error
                records for every failure
        """
        self._logger = logger

    def event_hooks(self) -> dict[str, list[EventHook]]:
        """Return hooks in the shape expected by ``httpx.AsyncClient(event_hooks=...)``."""
        return {"request": [self.on_request], "response": [self.on_response]}

    def emit(self, channel: str, msg: str, *args: object) -> None:
        """Send a record to the ``info``, ``error`` or ``debug`` channel, suppressing failures."""
        with contextlib.suppress(Exception):
            getattr(self._logger, channel)(msg, *args)

    async def on_request(self, request: httpx.Request) -> None:
        """Log the outgoing request; the request itself passes through untouched."""
        self.emit(
            "debug",
            "Request: %s %s params=%s body=%s headers=%s",
            request.method,
            request.url.path,
            dict(request.url.params),
            _describe_request_body(request),
            redact_headers(request.headers),
        )

    async def on_response(self, response: httpx.Response) -> None:
        """Read and inspect the response, raising before the caller sees a failed envelope.

        Raises:
            HabitifyAPIError: Envelope reports failure
            HabitifyTransportError: Error status or unparseable body without an envelope
        """
        await response.aread()
        request = response.request
        self.emit(
            "debug",
            "Response: %s %s params=%s status=%s body=%s",
            request.method,
            request.url.path,
            dict(request.url.params),
            response.status_code,
            response.text[:_MAX_LOGGED_BODY],
        )
        if response.is_redirect:
            return
        response.extensions[_RESULT_KEY] = self.interpret(response)

    def unwrap(self, response: httpx.Response) -> Any:
        """Return the envelope ``data`` already extracted by the response hook.

        Responses that did not pass through the hook are interpreted here.
        """
        if _RESULT_KEY in response.extensions:
            return response.extensions[_RESULT_KEY]
        return self.interpret(response)

    def interpret(self, response: httpx.Response) -> Any:
        """Decide success or failure of an exchange from its envelope.

        Args:
            response: Fully read HTTP response

        Returns:
            Any: The envelope ``data`` unchanged, or None for an empty success body

        Raises:
            HabitifyAPIError: Envelope ``status`` is false
            HabitifyTransportError: Error status or unparseable body without an envelope
        """
        envelope = parse_envelope(response)
        body = response.text
        path = response.request.url.path

        if envelope is not None and not envelope.status:
            error = HabitifyAPIError(envelope.message, response.status_code, body)
            self.emit(
                "error",
                "Habitify API error on %s (status=%s): %s",
                path,
                response.status_code,
                error.message,
            )
            raise error

        if not response.is_success:
            message = (
                envelope.message
                if envelope is not None and envelope.message
                else f"HTTP {response.status_code}"
            )
            self.emit("error", "Habitify request to %s failed: %s", path, message)
            raise HabitifyTransportError(message, response.status_code, body)

        if envelope is None:
            if not body.strip():
                return None
            self.emit(
                "error",
                "Habitify response from %s is not an envelope (status=%s)",
                path,
                response.status_code,
            )
            raise HabitifyTransportError.create_unparseable_error(response.status_code, body)

        return envelope.data
