"""Skipped-message debug output middleware.

Binds a SkippedMessageLog to every HTTP request (the unit of work). When
debug output is enabled, HTML responses outside the API get an HTML comment
listing the message keys that were short-circuited while rendering them:

    <!-- MessageCachePerformance skipped messages: tooltip-x, nstab-y -->

API responses are never modified. Raw ASGI: the HTML body is buffered
until its last chunk so the comment is appended after rendering finished.
"""

from typing import Callable

from msgcache.application.services.skipped_message_log import (
    SkippedMessageLog,
    begin_request_log,
    end_request_log,
    get_request_log,
)
from msgcache.core.constants import API_PATH_PREFIX


def _is_html(headers: list) -> bool:
    for k, v in headers:
        if k.lower() == b"content-type":
            return v.split(b";", 1)[0].strip().lower() == b"text/html"
    return False


def SkippedMessagesDebugMiddleware(
    app: Callable,
    enabled: bool = False,
    api_prefix: str = API_PATH_PREFIX,
) -> Callable:
    """Collect skipped keys per request; append them to HTML pages when enabled. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        token = begin_request_log()
        try:
            if not enabled or scope.get("path", "").startswith(api_prefix):
                await app(scope, receive, send)
                return
            await app(scope, receive, _debug_send(send, get_request_log()))
        finally:
            end_request_log(token)

    return asgi_app


def _debug_send(send: Callable, log: SkippedMessageLog | None) -> Callable:
    """Wrap send so that HTML bodies get the debug comment appended at the end."""
    start_message: dict | None = None
    chunks: list[bytes] = []

    async def send_wrapper(message: dict) -> None:
        nonlocal start_message
        if message["type"] == "http.response.start":
            if _is_html(message.get("headers", [])):
                start_message = message
                return
            await send(message)
            return
        if message["type"] != "http.response.body" or start_message is None:
            await send(message)
            return

        chunks.append(message.get("body", b""))
        if message.get("more_body", False):
            return
        body = b"".join(chunks)
        comment = log.render_debug_comment() if log is not None else ""
        if comment:
            body += comment.encode("utf-8")
        headers = [
            (k, v) for k, v in start_message.get("headers", []) if k.lower() != b"content-length"
        ]
        headers.append((b"content-length", str(len(body)).encode()))
        await send({**start_message, "headers": headers})
        await send({"type": "http.response.body", "body": body, "more_body": False})

    return send_wrapper
