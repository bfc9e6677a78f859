"""routeglob exception hierarchy.

Shared across the method validator, key composer, matcher, and registry
so every module raises and catches the same types. Malformed input is
always an error; a well-formed lookup that matches nothing returns
``None`` instead.
"""

from collections.abc import Sequence
from typing import Any


class RouteError(Exception):
    """Base for all routeglob errors."""


class InvalidMethod(RouteError):  # noqa: N818
    """Raised when a method is not a string or not one of the canonical methods."""

    def __init__(self, method: Any, allowed: Sequence[str]) -> None:
        self.method = method
        self.allowed = tuple(allowed)
        super().__init__(
            f"Router Error: Method {method!r} is not included in: {', '.join(self.allowed)}"
        )


class InvalidRouteKey(RouteError):  # noqa: N818
    """Raised when a raw ``METHOD:pattern`` key is malformed.

    When the key is well-shaped but names an unknown method, the
    ``InvalidMethod`` is chained as ``__cause__``.
    """

    def __init__(self, key: Any, allowed: Sequence[str], reason: str = "") -> None:
        self.key = key
        self.allowed = tuple(allowed)
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Router Error: Route key {key!r} must look like METHOD:pattern"
            f" with METHOD in: {', '.join(self.allowed)}{detail}"
        )


class InvalidPattern(RouteError):  # noqa: N818
    """Raised when a route pattern is not a string or cannot be compiled."""

    def __init__(self, pattern: Any, reason: str = "") -> None:
        self.pattern = pattern
        if reason:
            super().__init__(f"Router Error: Route {pattern!r} is not a valid pattern ({reason})")
        else:
            super().__init__(
                f"Router Error: Route must be a string, got {type(pattern).__name__}"
            )


class InvalidAction(RouteError):  # noqa: N818
    """Raised when an action is not callable."""

    def __init__(self, action: Any) -> None:
        self.action = action
        super().__init__(
            f"Router Error: Action must be a function, got {type(action).__name__}"
        )


class InvalidRouteList(RouteError):  # noqa: N818
    """Raised when ``add_routes`` receives something other than a list of triples."""

    def __init__(self, routes: Any, reason: str = "List must be an array") -> None:
        self.routes = routes
        super().__init__(f"Router Error: {reason}\nList: {routes!r}")
