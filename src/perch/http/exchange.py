"""Per-request binding between the router and its host environment.

The router reads the request method and path from an ``Exchange`` and
writes status, headers and body back through it. Anything with the
right shape works; ``BufferedExchange`` records everything in memory
for the server adapters and the test client.
"""

from typing import Protocol, runtime_checkable

from perch.http.response import Response


def normalize_path(path: str) -> str:
    """Strip trailing slashes; an empty result becomes ``/``.

    ``/items/`` -> ``/items``, ``""`` -> ``/``, ``"///"`` -> ``/``
    """
    return path.rstrip("/") or "/"


@runtime_checkable
class Exchange(Protocol):
    """The host environment as seen by one dispatch.

    ``set_status`` and ``set_header`` have no effect once
    ``headers_sent`` is true.
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def headers_sent(self) -> bool: ...

    def set_status(self, code: int) -> None: ...

    def set_header(self, name: str, value: str) -> None: ...

    def write(self, body: str) -> None: ...


class BufferedExchange:
    """In-memory exchange.

    Status defaults to 200. The first ``write`` commits the status and
    headers, after which they can no longer change, the way a real
    server behaves once output has started.
    """

    __slots__ = ("_chunks", "_headers", "_headers_sent", "_method", "_path", "_status")

    def __init__(self, method: str, path: str) -> None:
        self._method = method
        self._path = normalize_path(path)
        self._status = 200
        self._headers: list[tuple[str, str]] = []
        self._chunks: list[str] = []
        self._headers_sent = False

    def __repr__(self) -> str:
        return f"BufferedExchange({self._method!r}, {self._path!r}, status={self._status})"

    @property
    def method(self) -> str:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    @property
    def headers_sent(self) -> bool:
        return self._headers_sent

    @property
    def status(self) -> int:
        return self._status

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._headers)

    @property
    def body(self) -> str:
        return "".join(self._chunks)

    def set_status(self, code: int) -> None:
        if not self._headers_sent:
            self._status = code

    def set_header(self, name: str, value: str) -> None:
        if self._headers_sent:
            return
        # Replace, like PHP's header() and most server APIs
        name_lower = name.lower()
        self._headers = [(k, v) for k, v in self._headers if k.lower() != name_lower]
        self._headers.append((name, value))

    def write(self, body: str) -> None:
        self._headers_sent = True
        self._chunks.append(body)

    def to_response(self) -> Response:
        """Snapshot the recorded status, headers and body."""
        return Response(status=self._status, headers=tuple(self._headers), body=self.body)
