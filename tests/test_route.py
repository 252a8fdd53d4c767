"""Tests for perch.routing.route — path variants, Hooks, Route, RouteMatch."""

import pytest

from perch.routing.route import NO_HOOKS, Hooks, PrefixPath, Route, RouteMatch, StaticPath


def _handler(param: str) -> str:
    return param


class TestStaticPath:
    def test_exact_match_only(self) -> None:
        path = StaticPath("/items")
        assert path.matches("/items") is True
        assert path.matches("/items/42") is False
        assert path.matches("/item") is False

    def test_extract_is_empty(self) -> None:
        assert StaticPath("/items").extract("/items") == ""

    def test_str(self) -> None:
        assert str(StaticPath("/items")) == "/items"

    def test_frozen(self) -> None:
        path = StaticPath("/items")
        with pytest.raises(AttributeError):
            path.value = "/other"  # type: ignore[misc]


class TestPrefixPath:
    def test_matches_on_prefix(self) -> None:
        path = PrefixPath("/items/")
        assert path.matches("/items/42") is True
        assert path.matches("/items/42/extra") is True
        assert path.matches("/items") is False

    def test_extract_after_prefix(self) -> None:
        assert PrefixPath("/items/").extract("/items/42") == "42"

    def test_extract_keeps_deeper_segments(self) -> None:
        assert PrefixPath("/files/").extract("/files/docs/readme") == "docs/readme"

    def test_extract_uses_last_occurrence(self) -> None:
        assert PrefixPath("/a/").extract("/a/x/a/y") == "y"

    def test_str_marks_dynamic(self) -> None:
        assert str(PrefixPath("/items/")) == "/items/:"


class TestHooks:
    def test_empty_is_falsy(self) -> None:
        assert not Hooks()
        assert not NO_HOOKS

    def test_with_hook_is_truthy(self) -> None:
        assert Hooks(after=(lambda: None,))


class TestRoute:
    def test_creation(self) -> None:
        route = Route(method="GET", path=StaticPath("/items"), handler=_handler)
        assert route.method == "GET"
        assert route.handler is _handler
        assert route.hooks is NO_HOOKS
        assert route.expression == ""
        assert route.is_dynamic is False

    def test_dynamic(self) -> None:
        route = Route(method="GET", path=PrefixPath("/items/"), handler=_handler)
        assert route.is_dynamic is True

    def test_method_is_case_sensitive(self) -> None:
        route = Route(method="GET", path=StaticPath("/items"), handler=_handler)
        assert route.matches("GET", "/items") is True
        assert route.matches("get", "/items") is False

    def test_non_callable_handler_never_matches(self) -> None:
        route = Route(method="GET", path=StaticPath("/items"), handler="nope")  # type: ignore[arg-type]
        assert route.matches("GET", "/items") is False

    def test_frozen(self) -> None:
        route = Route(method="GET", path=StaticPath("/"), handler=_handler)
        with pytest.raises(AttributeError):
            route.method = "POST"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route(method="GET", path=PrefixPath("/items/"), handler=_handler)
        match = RouteMatch(route=route, param="42")
        assert match.route is route
        assert match.param == "42"
