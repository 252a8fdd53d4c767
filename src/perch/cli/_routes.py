"""``perch routes`` — list registered routes.

Resolves an import string to a perch Router and prints every route
with method, path expression and handler name, in match order, then
a count of routes that take a path parameter.
"""

import argparse
import sys

from perch.cli._resolve import resolve_router
from perch.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a perch router."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        rows.append((route.method, route.expression or str(route.path), handler_name))

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler_name in rows:
        print(fmt.format(method, path, handler_name))

    dynamic = sum(1 for route in routes if route.is_dynamic)
    print(f"\n{len(routes)} routes ({dynamic} with a path parameter)")
