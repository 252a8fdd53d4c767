"""WSGI adapter — serve a Router from any WSGI server.

Each call builds a ``BufferedExchange`` from ``REQUEST_METHOD`` and
``PATH_INFO``, dispatches it inline, then reports the recorded status
and headers through ``start_response``.
"""

import logging
from collections.abc import Callable, Iterable
from http import HTTPStatus
from typing import Any

from perch.app import Router
from perch.http.exchange import BufferedExchange

logger = logging.getLogger("perch.server")

StartResponse = Callable[..., Any]


def status_line(code: int) -> str:
    """Return a WSGI status line such as ``"404 Not Found"``."""
    try:
        return f"{code} {HTTPStatus(code).phrase}"
    except ValueError:
        return f"{code} Unknown"


class WSGIAdapter:
    """WSGI application wrapping a Router.

    Usage::

        application = WSGIAdapter(router)
        # gunicorn module:application
    """

    __slots__ = ("router",)

    def __init__(self, router: Router) -> None:
        self.router = router

    def __call__(self, environ: dict[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        # PEP 3333 carries the raw path bytes as latin-1 text
        path = environ.get("PATH_INFO", "").encode("latin-1").decode("utf-8", "replace") or "/"
        exchange = BufferedExchange(method, path)

        self.router.start(exchange)

        response = exchange.to_response()
        headers = list(response.headers)
        if response.content_type is None:
            headers.insert(0, ("Content-Type", self.router.config.default_content_type))
        body = response.body_bytes
        headers.append(("Content-Length", str(len(body))))

        logger.debug("%s %s -> %d", method, exchange.path, response.status)
        start_response(status_line(response.status), headers)
        return [body]
