"""Perch — a minimal HTTP request router.

Register handlers by method and path, dispatch one request per
``start()`` call, fall back to a not-found handler when nothing matches.

Basic usage::

    from perch import Router
    from perch.server.wsgi import WSGIAdapter

    router = Router()

    def show_item(item_id):
        router.json({"id": item_id})

    router.get("/items/:id", show_item)

    application = WSGIAdapter(router)
"""

__version__ = "0.1.0"
__all__ = [
    "BufferedExchange",
    "ConfigurationError",
    "Exchange",
    "Hooks",
    "InvalidHooks",
    "InvalidPathExpression",
    "NonCallableHandler",
    "PerchError",
    "RegistrationError",
    "Response",
    "Route",
    "Router",
    "RouterConfig",
    "get_exchange",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from perch.app import Router

        return Router

    if name == "RouterConfig":
        from perch.config import RouterConfig

        return RouterConfig

    if name in ("Exchange", "BufferedExchange"):
        from perch.http import exchange as _exchange

        return getattr(_exchange, name)

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name in ("Hooks", "Route"):
        from perch.routing import route as _route

        return getattr(_route, name)

    if name == "get_exchange":
        from perch.context import get_exchange

        return get_exchange

    if name in (
        "PerchError",
        "ConfigurationError",
        "RegistrationError",
        "NonCallableHandler",
        "InvalidPathExpression",
        "InvalidHooks",
    ):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
