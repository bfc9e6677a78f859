"""Tests for routeglob.errors - exception hierarchy and error messages."""

import pytest

from routeglob.errors import (
    InvalidAction,
    InvalidMethod,
    InvalidPattern,
    InvalidRouteKey,
    InvalidRouteList,
    RouteError,
)
from routeglob.methods import METHODS


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [InvalidAction, InvalidMethod, InvalidPattern, InvalidRouteKey, InvalidRouteList],
    )
    def test_is_route_error(self, error: type[Exception]) -> None:
        assert issubclass(error, RouteError)

    def test_route_error_is_exception(self) -> None:
        assert issubclass(RouteError, Exception)


class TestInvalidMethod:
    def test_carries_value_and_allowed(self) -> None:
        err = InvalidMethod("foo", METHODS)
        assert err.method == "foo"
        assert err.allowed == METHODS

    def test_message_lists_methods(self) -> None:
        err = InvalidMethod("foo", METHODS)
        assert str(err).startswith("Router Error: Method 'foo'")
        assert "POST, GET, PUT, PATCH, DELETE" in str(err)

    def test_non_string_value_in_message(self) -> None:
        err = InvalidMethod(42, METHODS)
        assert "42" in str(err)


class TestInvalidRouteKey:
    def test_carries_key(self) -> None:
        err = InvalidRouteKey("FOO:/x", METHODS, "unknown method 'FOO'")
        assert err.key == "FOO:/x"
        assert err.allowed == METHODS
        assert "unknown method 'FOO'" in str(err)

    def test_without_reason(self) -> None:
        err = InvalidRouteKey(None, METHODS)
        assert str(err).endswith("DELETE")


class TestOtherErrors:
    def test_invalid_pattern(self) -> None:
        err = InvalidPattern(3)
        assert err.pattern == 3
        assert "Route must be a string" in str(err)
        assert "int" in str(err)

    def test_invalid_action(self) -> None:
        err = InvalidAction(3)
        assert err.action == 3
        assert "Action must be a function" in str(err)

    def test_invalid_route_list_default_reason(self) -> None:
        err = InvalidRouteList("/edit")
        assert err.routes == "/edit"
        assert "List must be an array" in str(err)
        assert "'/edit'" in str(err)

    def test_invalid_route_list_custom_reason(self) -> None:
        err = InvalidRouteList([["/peace"]], "bad entry")
        assert "bad entry" in str(err)
