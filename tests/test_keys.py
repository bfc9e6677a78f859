"""Tests for routeglob.keys - RouteKey composition and validation."""

import pytest

from routeglob.errors import InvalidMethod, InvalidRouteKey
from routeglob.keys import compose_key, normalize_key, split_key, strip_query, validate_key


class TestComposeSplit:
    def test_compose(self) -> None:
        assert compose_key("GET", "/blog/*") == "GET:/blog/*"

    def test_split(self) -> None:
        assert split_key("GET:/blog/*") == ("GET", "/blog/*")

    def test_split_only_first_separator(self) -> None:
        assert split_key("GET:/proxy/host:8080/*") == ("GET", "/proxy/host:8080/*")

    def test_split_empty_pattern(self) -> None:
        assert split_key("GET:") == ("GET", "")


class TestValidateKey:
    def test_returns_canonical_method(self) -> None:
        assert validate_key("get:/x") == "GET"

    def test_pattern_with_colons(self) -> None:
        assert validate_key("PUT:/a:b:c") == "PUT"

    @pytest.mark.parametrize("key", [None, 3, "", b"GET:/x"])
    def test_not_a_string(self, key: object) -> None:
        with pytest.raises(InvalidRouteKey) as exc_info:
            validate_key(key)
        assert exc_info.value.key == key

    def test_missing_separator(self) -> None:
        with pytest.raises(InvalidRouteKey, match="separator"):
            validate_key("GET")

    def test_unknown_method_chains_cause(self) -> None:
        with pytest.raises(InvalidRouteKey) as exc_info:
            validate_key("FOO:/x")
        assert isinstance(exc_info.value.__cause__, InvalidMethod)

    def test_pattern_only_is_rejected(self) -> None:
        with pytest.raises(InvalidRouteKey):
            validate_key("/blog/*")


class TestNormalizeKey:
    def test_uppercases_method(self) -> None:
        assert normalize_key("delete:/x") == "DELETE:/x"

    def test_pattern_untouched(self) -> None:
        assert normalize_key("get:/Blog/*?a=1") == "GET:/Blog/*?a=1"


class TestStripQuery:
    def test_no_query(self) -> None:
        assert strip_query("/blog/42") == "/blog/42"

    def test_query(self) -> None:
        assert strip_query("/blog/42?draft=1&x=2") == "/blog/42"

    def test_first_question_mark_wins(self) -> None:
        assert strip_query("/a?b?c") == "/a"

    def test_empty_query(self) -> None:
        assert strip_query("/a?") == "/a"
