"""Path expression parsing.

A path expression is either a colon-free static path (``/items``) or a
prefix ending in ``/`` followed by one ``:name`` parameter
(``/items/:id``). Nothing else is accepted.
"""

import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from perch.routing.route import NO_HOOKS, Hooks, PrefixPath, RoutePath, StaticPath

# A Unicode letter or underscore, then letters, digits or underscores.
_IDENTIFIER = r"[^\W\d]\w*"
_DYNAMIC_RE = re.compile(rf"(?P<prefix>[^:]*/):{_IDENTIFIER}")


def encode_path(expression: str) -> RoutePath | None:
    """Parse a path expression into its stored form.

    Returns ``None`` when the expression is not valid; the caller
    decides how to report it.

    Examples::

        "/items"      -> StaticPath("/items")
        "/items/:id"  -> PrefixPath("/items/")
        "/items/:id/x" -> None
        "/a:b"         -> None
    """
    if not isinstance(expression, str) or not expression:
        return None
    if ":" not in expression:
        return StaticPath(expression)
    match = _DYNAMIC_RE.fullmatch(expression)
    if match is None:
        return None
    return PrefixPath(match.group("prefix"))


def _as_tuple(value: Any) -> tuple[Callable[[], Any], ...]:
    if value is None:
        return ()
    # A string is one (non-callable) hook, not a sequence of them
    if callable(value) or isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (value,)
    return tuple(value)


def normalize_hooks(hooks: Hooks | Mapping[str, Any] | None) -> Hooks | None:
    """Coerce the accepted hook shapes into a ``Hooks`` value.

    Accepts ``None``, a ``Hooks`` instance, or a mapping with optional
    ``"before"`` / ``"after"`` keys holding a single callable or a
    sequence of callables. Returns ``None`` for any other shape.
    """
    if hooks is None:
        return NO_HOOKS
    if isinstance(hooks, Hooks):
        return hooks
    if not isinstance(hooks, Mapping):
        return None
    normalized = Hooks(
        before=_as_tuple(hooks.get("before")),
        after=_as_tuple(hooks.get("after")),
    )
    return normalized if normalized else NO_HOOKS
