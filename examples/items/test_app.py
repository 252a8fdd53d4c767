"""Tests for the items example."""

from perch.testing import TestClient


class TestItemsApp:
    def test_empty_list(self, example_router) -> None:
        response = TestClient(example_router).get("/items")
        assert response.status == 200
        assert response.json() == []

    def test_create_then_show(self, example_router) -> None:
        client = TestClient(example_router)
        created = client.post("/items/milk")
        assert created.status == 201
        assert created.json() == {"id": 1, "title": "milk"}

        shown = client.get("/items/1")
        assert shown.status == 200
        assert shown.json() == {"id": 1, "title": "milk"}

    def test_show_missing_item(self, example_router) -> None:
        response = TestClient(example_router).get("/items/99")
        assert response.status == 404
        assert response.json() == {"error": "item '99' not found"}

    def test_rename_and_delete(self, example_router) -> None:
        client = TestClient(example_router)
        client.post("/items/eggs")

        renamed = client.put("/items/1")
        assert renamed.json() == {"id": 1, "title": "eggs (edited)"}

        deleted = client.delete("/items/1")
        assert deleted.status == 204
        assert deleted.text == ""
        assert client.get("/items").json() == []

    def test_write_routes_run_hooks_in_order(self, example_module) -> None:
        client = TestClient(example_module.router)
        client.post("/items/bread")
        client.get("/items/1")
        assert example_module.audit == ["write", "done"]

    def test_unknown_route_uses_default_not_found(self, example_router) -> None:
        response = TestClient(example_router).get("/nothing/here")
        assert response.status == 404
        assert response.text == '{"error":"404 - not found"}'
        assert response.header("Access-Control-Allow-Origin") == "*"
