"""Tests for perch.testing — TestClient."""

from perch.app import Router
from perch.testing import TestClient


def _echo_router() -> Router:
    router = Router()

    @router.route("/echo/:value", methods=("GET", "POST", "PUT", "DELETE"))
    def echo(value: str) -> None:
        router.json({"method": router.exchange.method, "value": value})

    return router


class TestTestClient:
    def test_methods(self) -> None:
        client = TestClient(_echo_router())

        assert client.get("/echo/a").json() == {"method": "GET", "value": "a"}
        assert client.post("/echo/b").json() == {"method": "POST", "value": "b"}
        assert client.put("/echo/c").json() == {"method": "PUT", "value": "c"}
        assert client.delete("/echo/d").json() == {"method": "DELETE", "value": "d"}

    def test_request_arbitrary_method(self) -> None:
        response = TestClient(_echo_router()).request("PATCH", "/echo/x")
        assert response.status == 404

    def test_fresh_exchange_per_request(self) -> None:
        router = Router()
        router.get("/once", lambda p: router.status(201).text("made"))
        client = TestClient(router)

        first = client.get("/once")
        missing = client.get("/other")

        assert first.status == 201
        assert missing.status == 404
        assert missing.text == '{"error":"404 - not found"}'

    def test_not_collected_by_pytest(self) -> None:
        assert TestClient.__test__ is False
