"""Router — the public entry point.

Registers handlers keyed by HTTP method and path expression, then
dispatches one request per ``start()`` call: the first matching route
runs between its before/after hooks, and when nothing matches the
status is set to 404 and the fallback handler runs.

Basic usage::

    from perch import Router

    router = Router()

    def show_item(item_id: str) -> None:
        router.json({"id": item_id})

    router.get("/items/:id", show_item)
    router.start(exchange)
"""

import json as json_module
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

from perch._internal.types import FallbackHandler, Handler
from perch.config import RouterConfig
from perch.context import exchange_var, get_exchange
from perch.errors import (
    ConfigurationError,
    InvalidHooks,
    InvalidPathExpression,
    NonCallableHandler,
)
from perch.http.exchange import Exchange
from perch.routing.pattern import encode_path, normalize_hooks
from perch.routing.route import Hooks, Route, RouteMatch
from perch.routing.router import RouteTable

logger = logging.getLogger("perch.router")

HooksArg: TypeAlias = Hooks | Mapping[str, Any] | None


class Router:
    """Minimal HTTP request router.

    Routes are matched in registration order; the first match wins.
    Path expressions are either static (``/items``) or end in a single
    parameter (``/items/:id``), which is passed to the handler as a
    string.

    Registration happens during setup. The first ``start()`` freezes
    the table, after which registering raises ``ConfigurationError``.
    """

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._table = RouteTable(warn_shadowed=self.config.warn_on_shadowed_routes)
        self._fallback: FallbackHandler = self._not_found
        self._freeze_lock: threading.Lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Router(routes={len(self._table)})"

    # -- Route registration --

    def register(
        self,
        method: str,
        path: str,
        handler: Handler,
        hooks: HooksArg = None,
    ) -> None:
        """Register *handler* for *method* requests matching *path*.

        Raises ``NonCallableHandler``, ``InvalidPathExpression`` or
        ``InvalidHooks`` (after logging the problem) and leaves the
        table unchanged when the registration is not valid.
        """
        self._check_not_frozen()

        if not callable(handler):
            error = NonCallableHandler(method, path, handler)
            logger.error("Route registration failed: %s", error)
            raise error

        encoded = encode_path(path)
        if encoded is None:
            error = InvalidPathExpression(method, path)
            logger.error("Route registration failed: %s", error)
            raise error

        normalized_hooks = normalize_hooks(hooks)
        if normalized_hooks is None:
            error = InvalidHooks(method, path, hooks)
            logger.error("Route registration failed: %s", error)
            raise error

        self._table.add(
            Route(
                method=method,
                path=encoded,
                handler=handler,
                hooks=normalized_hooks,
                expression=path,
            )
        )
        logger.debug("Registered %s %s", method, path)

    def get(self, path: str, handler: Handler, hooks: HooksArg = None) -> None:
        """Register a GET route."""
        self.register("GET", path, handler, hooks)

    def post(self, path: str, handler: Handler, hooks: HooksArg = None) -> None:
        """Register a POST route."""
        self.register("POST", path, handler, hooks)

    def put(self, path: str, handler: Handler, hooks: HooksArg = None) -> None:
        """Register a PUT route."""
        self.register("PUT", path, handler, hooks)

    def delete(self, path: str, handler: Handler, hooks: HooksArg = None) -> None:
        """Register a DELETE route."""
        self.register("DELETE", path, handler, hooks)

    def route(
        self,
        path: str,
        *,
        methods: Iterable[str] = ("GET",),
        hooks: HooksArg = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Path expression, ``/static`` or ``/prefix/:name``.
            methods: HTTP methods. Defaults to ``("GET",)``.
            hooks: Before/after hooks shared by every method.
        """

        def decorator(func: Handler) -> Handler:
            for method in methods:
                self.register(method, path, func, hooks)
            return func

        return decorator

    @property
    def routes(self) -> list[Route]:
        """Registered routes in registration order."""
        return self._table.routes

    # -- Fallback --

    @property
    def fallback(self) -> FallbackHandler:
        """The handler invoked when no route matches."""
        return self._fallback

    def set_fallback(self, handler: FallbackHandler) -> bool:
        """Replace the not-found handler.

        Returns ``False`` and keeps the current handler when *handler*
        is not callable.
        """
        if not callable(handler):
            logger.debug("Ignoring non-callable fallback %r", handler)
            return False
        self._fallback = handler
        return True

    def _not_found(self) -> None:
        self.json({"error": self.config.not_found_message})

    # -- Dispatch --

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return the route that would serve *method* *path*, if any."""
        return self._table.match(method, path)

    def start(self, exchange: Exchange) -> None:
        """Dispatch the request carried by *exchange*.

        Runs the first matching route's before hooks, its handler and
        its after hooks, or sets status 404 and runs the fallback.
        Exceptions raised by hooks or handlers propagate to the caller.
        """
        self._ensure_frozen()
        token = exchange_var.set(exchange)
        try:
            method, path = exchange.method, exchange.path
            match = self._table.match(method, path)
            if match is None:
                logger.debug("No route for %s %s", method, path)
                self.status(404)
                self._fallback()
                return

            logger.debug("Dispatching %s %s to %s", method, path, match.route.expression)
            route = match.route
            _run_hooks(route.hooks.before)
            route.handler(match.param)
            _run_hooks(route.hooks.after)
        finally:
            exchange_var.reset(token)

    # -- Response helpers --

    @property
    def exchange(self) -> Exchange:
        """The exchange being dispatched. Raises ``LookupError`` outside ``start()``."""
        return get_exchange()

    def status(self, code: int) -> "Router":
        """Set the response status when *code* is an int. Returns the router."""
        if isinstance(code, int) and not isinstance(code, bool):
            get_exchange().set_status(code)
        return self

    def json(self, value: Any) -> None:
        """Write *value* as a JSON body.

        CORS and content-type headers are set only while headers can
        still be sent. A value that cannot be serialised produces an
        empty body.
        """
        exchange = get_exchange()
        if not exchange.headers_sent:
            exchange.set_header("Access-Control-Allow-Origin", self.config.cors_origin)
            exchange.set_header("Content-Type", self.config.json_content_type)
        try:
            body = json_module.dumps(value, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            logger.warning("JSON serialisation failed: %s", exc)
            body = ""
        exchange.write(body)

    def text(self, body: str) -> None:
        """Write *body* as-is, without touching headers."""
        get_exchange().write(body)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Freeze the route table exactly once, even under concurrent first requests."""
        if self._table.compiled:
            return
        with self._freeze_lock:
            if self._table.compiled:
                return
            self._table.compile()
            logger.debug("Route table frozen with %d routes", len(self._table))

    def _check_not_frozen(self) -> None:
        if self._table.compiled:
            msg = (
                "Cannot register routes after the router has started dispatching. "
                "Register all routes before the first start() call."
            )
            raise ConfigurationError(msg)


def _run_hooks(hooks: tuple[Any, ...]) -> None:
    for hook in hooks:
        if callable(hook):
            hook()
