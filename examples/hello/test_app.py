"""Tests for the hello example."""

from perch.testing import TestClient


class TestHelloApp:
    """Verify every route in the hello example works through the router."""

    def test_index(self, example_router) -> None:
        response = TestClient(example_router).get("/")
        assert response.status == 200
        assert response.text == "Hello, World!"

    def test_greet_runs_before_hook_first(self, example_router) -> None:
        response = TestClient(example_router).get("/greet/alice")
        assert response.status == 200
        assert response.text == "such fun! Hello, alice!"

    def test_json_response(self, example_router) -> None:
        response = TestClient(example_router).get("/api/status")
        assert response.status == 200
        assert response.content_type == "application/json"
        assert response.json() == {"status": "ok", "version": "0.1.0"}

    def test_custom_not_found(self, example_router) -> None:
        response = TestClient(example_router).get("/nope")
        assert response.status == 404
        assert response.text == "Nothing at /nope"
