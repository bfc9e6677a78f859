"""Tests for routeglob.table - human-readable route listing."""

from routeglob.registry import Routes
from routeglob.table import describe_action, format_routes


def show_post(request, post_id: int = 0):
    pass


class TestDescribeAction:
    def test_function(self) -> None:
        assert describe_action(show_post) == "show_post(request, post_id: int = 0)"

    def test_lambda(self) -> None:
        assert describe_action(lambda: 3) == "<anonymous>()"

    def test_builtin_without_signature(self) -> None:
        # Some builtins expose no signature
        assert describe_action(dict).startswith("dict")


class TestFormatRoutes:
    def test_empty(self) -> None:
        assert format_routes([], []) == "No routes registered."

    def test_rows(self) -> None:
        text = format_routes(["GET:/blog/*", "POST:/blog"], [show_post, show_post])
        lines = text.splitlines()
        assert lines[0].split() == ["METHOD", "PATTERN", "ACTION"]
        assert set(lines[1]) == {"-"}
        assert lines[2].startswith("GET     /blog/*")
        assert lines[3].startswith("POST    /blog")
        assert "show_post(request" in lines[2]

    def test_query_stripped_from_pattern(self) -> None:
        text = format_routes(["GET:/query?a=1"], [show_post])
        assert "/query " in text
        assert "?a=1" not in text

    def test_registry_to_string(self) -> None:
        routes = Routes()
        assert routes.to_string() == "No routes registered."
        routes.add_method_route(Routes.DELETE, "/temp", show_post)
        assert "DELETE" in str(routes)
        assert "/temp" in str(routes)
