"""Hello World — the simplest perch router.

Demonstrates static and parameter routes, a before hook, and a custom
not-found handler.

Run:
    perch serve app:router
"""

from perch import Router

router = Router()


def index(_: str) -> None:
    router.text("Hello, World!")


def greet(name: str) -> None:
    router.text(f"Hello, {name}!")


def such_fun() -> None:
    router.text("such fun! ")


def status(_: str) -> None:
    router.json({"status": "ok", "version": "0.1.0"})


def not_found() -> None:
    router.text(f"Nothing at {router.exchange.path}")


router.get("/", index)
router.get("/greet/:name", greet, {"before": such_fun})
router.get("/api/status", status)
router.set_fallback(not_found)
