"""Request-scoped context via ContextVar.

Provides ``exchange_var``: the ``Exchange`` of the request currently
being dispatched. ``Router.start`` sets it and resets it afterwards, so
handlers and hooks reach the host environment without it being passed
around.

Thread safety:
    ``ContextVar`` is thread-local for the WSGI adapter and task-local
    under the ASGI adapter. One Router can serve concurrent requests
    without locks.
"""

from contextvars import ContextVar

from perch.http.exchange import Exchange

exchange_var: ContextVar[Exchange] = ContextVar("perch_exchange")
"""The current exchange. Set by ``Router.start`` for the duration of dispatch."""


def get_exchange() -> Exchange:
    """Return the current exchange.

    Raises ``LookupError`` if called outside a dispatch.
    """
    return exchange_var.get()
