"""ASGI adapter — serve a Router from any ASGI 3 server.

Dispatch is synchronous, so each request runs ``Router.start`` in a
worker thread via ``anyio.to_thread`` and the recorded response is sent
back as one ``http.response.start`` / ``http.response.body`` pair.
"""

import logging

import anyio

from perch._internal.asgi import HTTPScope, Receive, Scope, Send
from perch.app import Router
from perch.http.exchange import BufferedExchange
from perch.http.response import Response

logger = logging.getLogger("perch.server")


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


class ASGIAdapter:
    """ASGI application wrapping a Router.

    Usage::

        application = ASGIAdapter(router)
        # uvicorn module:application
    """

    __slots__ = ("router",)

    def __init__(self, router: Router) -> None:
        self.router = router

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] in ("pounce.worker.startup", "pounce.worker.shutdown"):
            # Per-worker lifecycle; the router keeps no per-worker state
            return

        if scope["type"] != "http":
            msg = f"Unsupported ASGI scope type: {scope['type']!r}"
            raise RuntimeError(msg)

        http_scope = HTTPScope.from_scope(scope)
        exchange = BufferedExchange(http_scope.method, http_scope.path)
        await anyio.to_thread.run_sync(self.router.start, exchange)
        await send_response(exchange.to_response(), send, self.router.config.default_content_type)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the lifespan protocol; the router has no startup work."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return


async def send_response(response: Response, send: Send, default_content_type: str) -> None:
    """Translate a Response into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    ]
    if response.content_type is None:
        raw_headers.insert(0, (b"content-type", default_content_type.encode("latin-1")))

    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    logger.debug("%d %d bytes", response.status, len(body))
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
