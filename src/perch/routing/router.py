"""Ordered route table with first-match lookup.

Routes are appended during setup and frozen before the first request.
Lookup walks the table in registration order and returns the first
route whose method and path both match, so a later route that overlaps
an earlier one is never reached.
"""

import logging

from perch.routing.route import PrefixPath, Route, RouteMatch, StaticPath

logger = logging.getLogger("perch.router")


class RouteTable:
    """Ordered route table.

    Usage::

        table = RouteTable()
        table.add(Route("GET", PrefixPath("/items/"), handler))
        table.compile()
        match = table.match("GET", "/items/42")  # RouteMatch(route, "42")
    """

    __slots__ = ("_compiled", "_routes", "_warn_shadowed")

    def __init__(self, *, warn_shadowed: bool = True) -> None:
        self._routes: list[Route] = []
        self._compiled = False
        self._warn_shadowed = warn_shadowed

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        if self._warn_shadowed:
            shadow = self.shadowing(route)
            if shadow is not None:
                logger.warning(
                    "Route %s %s is unreachable: %s %s was registered first",
                    route.method,
                    route.expression or route.path,
                    shadow.method,
                    shadow.expression or shadow.path,
                )

        self._routes.append(route)

    def shadowing(self, route: Route) -> Route | None:
        """Return the earlier route that makes *route* unreachable, if any.

        A route is shadowed by an earlier route with the same method
        and the same path, or by an earlier prefix route whose prefix
        covers every path the new route can match.
        """
        for existing in self._routes:
            if existing.method != route.method:
                continue
            if existing.path == route.path:
                return existing
            if isinstance(existing.path, PrefixPath):
                candidate = (
                    route.path.value if isinstance(route.path, StaticPath) else route.path.prefix
                )
                if candidate.startswith(existing.path.prefix):
                    return existing
        return None

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._compiled = True

    @property
    def compiled(self) -> bool:
        """Whether compile() has run."""
        return self._compiled

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Match a request method and path against the table.

        Returns the first matching route with its extracted parameter,
        or ``None`` when nothing matches. A route whose handler is no
        longer callable is skipped.
        """
        for route in self._routes:
            if route.matches(method, path):
                return RouteMatch(route=route, param=route.path.extract(path))
        return None
