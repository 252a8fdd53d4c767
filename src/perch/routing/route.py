"""Route, path variants, hooks and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import TypeAlias

from perch._internal.types import Handler, Hook


@dataclass(frozen=True, slots=True)
class StaticPath:
    """A path that matches only when the request path is identical.

    ``/items`` -> ``StaticPath("/items")``
    """

    value: str

    def matches(self, path: str) -> bool:
        return path == self.value

    def extract(self, path: str) -> str:
        return ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PrefixPath:
    """A path ending in one dynamic segment.

    ``/items/:id`` -> ``PrefixPath("/items/")``. Any request path that
    starts with the prefix matches, whatever follows it.
    """

    prefix: str

    def matches(self, path: str) -> bool:
        return path.startswith(self.prefix)

    def extract(self, path: str) -> str:
        """Return the text after the last occurrence of the prefix."""
        return path.split(self.prefix)[-1]

    def __str__(self) -> str:
        return f"{self.prefix}:"


RoutePath: TypeAlias = StaticPath | PrefixPath


@dataclass(frozen=True, slots=True)
class Hooks:
    """Zero-argument callables run around a matched handler.

    Empty tuples mean no hooks. Entries that are not callable are
    skipped at dispatch time.
    """

    before: tuple[Hook, ...] = ()
    after: tuple[Hook, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.before or self.after)


NO_HOOKS = Hooks()


@dataclass(frozen=True, slots=True)
class Route:
    """A registered endpoint.

    Created by ``Router.register``; the table never mutates it.
    """

    method: str
    path: RoutePath
    handler: Handler
    hooks: Hooks = NO_HOOKS
    expression: str = ""

    @property
    def is_dynamic(self) -> bool:
        return isinstance(self.path, PrefixPath)

    def matches(self, method: str, path: str) -> bool:
        return method == self.method and callable(self.handler) and self.path.matches(path)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    param: str
