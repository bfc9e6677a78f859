"""routeglob: METHOD:pattern route registry with glob matching.

Maps an HTTP method and a glob path pattern to an action, and resolves a
concrete request path back to the action of the first registered
pattern that matches it.

Basic usage::

    from routeglob import Routes

    routes = Routes()
    routes.add_method_route(Routes.GET, "/blog/*", show_post)
    routes.add_routes([
        (Routes.POST, "/blog", create_post),
        (Routes.DELETE, "/blog/*", delete_post),
    ])

    action = routes.get_method_action("GET", "/blog/42?draft=1")
"""

__version__ = "0.1.0"
__all__ = [
    "DELETE",
    "GET",
    "METHODS",
    "PATCH",
    "POST",
    "PUT",
    "GlobMatcher",
    "InvalidAction",
    "InvalidMethod",
    "InvalidPattern",
    "InvalidRouteKey",
    "InvalidRouteList",
    "PatternMatcher",
    "RouteError",
    "RouteMatch",
    "Routes",
    "RoutesConfig",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routeglob`` fast while providing a clean top-level API.
    """
    if name == "Routes":
        from routeglob.registry import Routes

        return Routes

    if name == "RoutesConfig":
        from routeglob.config import RoutesConfig

        return RoutesConfig

    if name == "RouteMatch":
        from routeglob.route import RouteMatch

        return RouteMatch

    if name in ("GlobMatcher", "PatternMatcher"):
        from routeglob import matching as _matching

        return getattr(_matching, name)

    if name in ("DELETE", "GET", "METHODS", "PATCH", "POST", "PUT"):
        from routeglob import methods as _methods

        return getattr(_methods, name)

    if name in (
        "InvalidAction",
        "InvalidMethod",
        "InvalidPattern",
        "InvalidRouteKey",
        "InvalidRouteList",
        "RouteError",
    ):
        from routeglob import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
