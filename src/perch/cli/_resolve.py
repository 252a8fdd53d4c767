"""Locate the Router a CLI command should act on.

``perch routes`` and ``perch serve`` both take a ``module:attribute``
argument naming where the router lives.
"""

import importlib

from perch.app import Router


def resolve_router(import_string: str) -> Router:
    """Import *import_string* and return the Router it names.

    ``"shop.api:router"`` imports ``shop.api`` and reads its ``router``
    attribute; a bare ``"shop.api"`` reads the same attribute by default.
    When the attribute is a zero-argument callable that builds the
    router (``"shop.api:create_router"``), it is called once and its
    result is used.

    Raises:
        ModuleNotFoundError: The module part does not import.
        AttributeError: The module has no such attribute.
        TypeError: Building the router failed, or the result is some
            other kind of object.
    """
    module_name, _, attr = import_string.partition(":")
    attr = attr or "router"

    target = getattr(importlib.import_module(module_name), attr)

    if callable(target) and not isinstance(target, Router):
        try:
            target = target()
        except Exception as exc:
            msg = f"Building a router from {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, Router):
        msg = f"{import_string!r} is a {type(target).__name__}, not a perch.Router instance"
        raise TypeError(msg)

    return target
