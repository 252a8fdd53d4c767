"""Perch exception hierarchy.

Registration problems are reported by raising; whether a failed setup
terminates the process is left to whoever called the registration API.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when router setup is invalid.

    Also raised when a route is registered after the router started
    dispatching requests.
    """


class RegistrationError(ConfigurationError):
    """A route could not be registered. Nothing was added to the table."""

    def __init__(self, method: str, expression: object, detail: str) -> None:
        self.method = method
        self.expression = expression
        self.detail = detail
        super().__init__(f"{method} {expression!r}: {detail}")


class NonCallableHandler(RegistrationError):  # noqa: N818
    """The handler passed to ``register`` is not invokable."""

    def __init__(self, method: str, expression: object, handler: object) -> None:
        self.handler = handler
        super().__init__(
            method,
            expression,
            f"handler {type(handler).__name__} is not callable",
        )


class InvalidPathExpression(RegistrationError):  # noqa: N818
    """The path expression does not follow the route grammar.

    Accepted shapes are a colon-free path (``/items``) or a prefix ending
    in ``/`` followed by a single ``:name`` parameter (``/items/:id``).
    """

    def __init__(self, method: str, expression: object) -> None:
        super().__init__(
            method,
            expression,
            "path expression not valid (expected '/static/path' or '/prefix/:name')",
        )


class InvalidHooks(RegistrationError):  # noqa: N818
    """The hooks argument is neither a ``Hooks`` instance, a mapping nor ``None``."""

    def __init__(self, method: str, expression: object, hooks: object) -> None:
        self.hooks = hooks
        super().__init__(
            method,
            expression,
            f"hooks must be a Hooks instance or a mapping, not {type(hooks).__name__}",
        )
