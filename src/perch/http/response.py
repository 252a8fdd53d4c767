"""Immutable snapshot of a finished response.

Produced by ``BufferedExchange.to_response()`` once dispatch returns.
Adapters translate it to WSGI or ASGI; tests assert against it.
"""

import json as json_module
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """Status, headers and body of one dispatched request."""

    status: int = 200
    headers: tuple[tuple[str, str], ...] = ()
    body: str = ""

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the last value set for *name* (case-insensitive)."""
        name_lower = name.lower()
        for key, value in reversed(self.headers):
            if key.lower() == name_lower:
                return value
        return default

    @property
    def content_type(self) -> str | None:
        return self.header("Content-Type")

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json_module.loads(self.body)
