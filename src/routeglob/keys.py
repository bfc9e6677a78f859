"""RouteKey composition and decomposition.

A RouteKey is ``METHOD + ":" + pattern``. Only the first ``:`` is a
separator; the pattern may contain more (``/proxy/host:8080/*``).
"""

from typing import Any

from routeglob.errors import InvalidMethod, InvalidRouteKey
from routeglob.methods import METHODS, validate_method

SEPARATOR = ":"


def compose_key(method: str, pattern: str) -> str:
    """Join an already-validated method and a pattern into a RouteKey."""
    return f"{method}{SEPARATOR}{pattern}"


def split_key(key: str) -> tuple[str, str]:
    """Split *key* on its first separator into ``(method, pattern)``.

    The method part is returned as given, not validated.
    """
    method, _, pattern = key.partition(SEPARATOR)
    return method, pattern


def validate_key(key: Any) -> str:
    """Validate a raw RouteKey and return its canonical method.

    Raises ``InvalidRouteKey`` if *key* is not a non-empty string, has no
    separator, or its method segment is not a canonical method.
    """
    if not isinstance(key, str) or not key:
        raise InvalidRouteKey(key, METHODS, "not a non-empty string")
    if SEPARATOR not in key:
        raise InvalidRouteKey(key, METHODS, f"missing {SEPARATOR!r} separator")
    method, _ = split_key(key)
    try:
        return validate_method(method)
    except InvalidMethod as exc:
        raise InvalidRouteKey(key, METHODS, f"unknown method {method!r}") from exc


def normalize_key(key: Any) -> str:
    """Validate *key* and rebuild it with the uppercase method."""
    method = validate_key(key)
    _, pattern = split_key(key)
    return compose_key(method, pattern)


def strip_query(route: str) -> str:
    """Drop everything from the first ``?`` onward.

    ``/blog/42?draft=1`` -> ``/blog/42``
    """
    return route.partition("?")[0]
