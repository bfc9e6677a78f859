"""Route registry: METHOD:pattern keys resolved by glob matching.

Keys are composed as ``METHOD:pattern`` and stored in a ``PatternMatcher``
in registration order. Lookups compose the same kind of key from a
concrete path and ask the matcher for the first registered pattern that
matches it.

Free-threading safety:
    - Every matcher call happens under ``Routes._lock``
    - The duplicate check and the insert in ``add_route`` are one critical section
    - ``routes()`` and ``actions()`` snapshots are taken under the same lock
"""

import logging
import threading
from collections.abc import Iterator, Sequence
from typing import Any

from routeglob import methods
from routeglob.config import RoutesConfig
from routeglob.errors import InvalidAction, InvalidPattern, InvalidRouteKey, InvalidRouteList
from routeglob.keys import compose_key, normalize_key, split_key, strip_query
from routeglob.matching.glob import GlobMatcher
from routeglob.matching.protocol import Action, PatternMatcher
from routeglob.methods import validate_method
from routeglob.route import RouteMatch
from routeglob.table import describe_action, format_routes

logger = logging.getLogger("routeglob.registry")


class Routes:
    """Ordered route table mapping ``METHOD:pattern`` to actions.

    Usage::

        routes = Routes()
        routes.add_method_route(Routes.GET, "/blog/*", show_post)
        routes.get_method_action("GET", "/blog/42?draft=1")  # show_post
        routes.get_method_route_match("GET", "/blog/42")      # "GET:/blog/*"

    One instance backs one logical route table; instances share nothing.
    Lookups that match nothing return ``None``. Malformed input raises a
    ``RouteError`` subclass before anything is stored.
    """

    POST = methods.POST
    GET = methods.GET
    PUT = methods.PUT
    PATCH = methods.PATCH
    DELETE = methods.DELETE

    __slots__ = ("_config", "_lock", "_matcher")

    def __init__(
        self,
        matcher: PatternMatcher | None = None,
        *,
        config: RoutesConfig | None = None,
    ) -> None:
        self._config = config or RoutesConfig()
        if matcher is None:
            matcher = GlobMatcher(case_sensitive=self._config.case_sensitive)
        self._matcher = matcher
        self._lock = threading.Lock()

    @property
    def config(self) -> RoutesConfig:
        return self._config

    # -- Registration -----------------------------------------------------

    def add_route(self, key: str, action: Action) -> "Routes":
        """Register *action* under a raw ``METHOD:pattern`` key.

        The pattern is stored as given, query string included. Registering
        a key that already exists keeps the original action and logs a
        warning. Returns ``self`` for chaining.
        """
        normalized = normalize_key(key)
        if not callable(action):
            raise InvalidAction(action)

        with self._lock:
            if normalized in self._matcher:
                if self._config.warn_on_duplicate:
                    method, pattern = split_key(normalized)
                    logger.warning(
                        "Already Exists: %s already has an action for method %s.",
                        pattern,
                        method,
                    )
                return self
            self._matcher.add(normalized, action)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Added route %s -> %s", normalized, describe_action(action))
        return self

    def add_method_route(self, method: str, pattern: str, action: Action) -> "Routes":
        """Register *action* for *method* and *pattern*. Returns ``self``."""
        method = validate_method(method)
        if not isinstance(pattern, str):
            raise InvalidPattern(pattern)
        return self.add_route(compose_key(method, pattern), action)

    def add_routes(self, routes: Sequence[Sequence[Any]]) -> "Routes":
        """Register ``(method, pattern, action)`` triples in order.

        Not transactional: when an entry fails, the entries before it
        stay registered and the ones after it are never attempted.
        """
        if not isinstance(routes, (list, tuple)):
            raise InvalidRouteList(routes)
        for entry in routes:
            if not isinstance(entry, (list, tuple)) or len(entry) != 3:
                msg = f"Each entry must be [method, route, action], got {entry!r}"
                raise InvalidRouteList(routes, msg)
            method, pattern, action = entry
            self.add_method_route(method, pattern, action)
        return self

    # -- Raw-key lookups ----------------------------------------------------

    def get_action(self, key: str) -> Action | None:
        """Return the action of the first pattern matching *key*, or ``None``."""
        candidate = self._raw_candidate(key)
        with self._lock:
            return self._matcher.get(candidate)

    def get_route_match(self, key: str) -> str | None:
        """Return the registered key that *key* resolves to, or ``None``."""
        candidate = self._raw_candidate(key)
        with self._lock:
            return self._matcher.match(candidate)

    def remove_route(self, key: str) -> Action | None:
        """Remove the entry *key* resolves to and return its action.

        The removed entry is the matched pattern, which differs from
        *key* when *key* is a concrete path under a wildcard pattern.
        """
        return self._remove(self._raw_candidate(key))

    def has_route(self, key: str) -> bool:
        candidate = self._raw_candidate(key)
        with self._lock:
            return self._matcher.has(candidate)

    # -- Method-aware lookups ---------------------------------------------------

    def get_method_action(self, method: str, route: str) -> Action | None:
        candidate = self._method_candidate(method, route)
        with self._lock:
            return self._matcher.get(candidate)

    def get_method_route_match(self, method: str, route: str) -> str | None:
        candidate = self._method_candidate(method, route)
        with self._lock:
            return self._matcher.match(candidate)

    def remove_method_route(self, method: str, route: str) -> Action | None:
        return self._remove(self._method_candidate(method, route))

    def has_method_route(self, method: str, route: str) -> bool:
        candidate = self._method_candidate(method, route)
        with self._lock:
            return self._matcher.has(candidate)

    def match(self, method: str, route: str) -> RouteMatch | None:
        """Resolve *method* and *route* to a ``RouteMatch``, or ``None``."""
        candidate = self._method_candidate(method, route)
        with self._lock:
            key = self._matcher.match(candidate)
            if key is None:
                return None
            action = self._matcher.get(candidate)
        matched_method, pattern = split_key(key)
        return RouteMatch(method=matched_method, pattern=pattern, key=key, action=action)

    # -- Bulk ----------------------------------------------------------------

    def clear_all(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._matcher.clear()
        logger.debug("Cleared all routes")

    def routes(self) -> list[str]:
        """Registered keys in registration order. Aligned with ``actions()``."""
        with self._lock:
            return self._matcher.keys()

    def actions(self) -> list[Action]:
        """Registered actions in registration order. Aligned with ``routes()``."""
        with self._lock:
            return self._matcher.values()

    def to_string(self) -> str:
        """Tabular listing of method, pattern, and action."""
        keys, actions = self._snapshot()
        return format_routes(keys, actions)

    # -- Internals -----------------------------------------------------------

    def _raw_candidate(self, key: str) -> str:
        return strip_query(normalize_key(key))

    def _method_candidate(self, method: str, route: str) -> str:
        method = validate_method(method)
        if not isinstance(route, str):
            raise InvalidPattern(route)
        return compose_key(method, strip_query(route))

    def _remove(self, candidate: str) -> Action | None:
        with self._lock:
            key = self._matcher.match(candidate)
            if key is None:
                return None
            action = self._matcher.remove(candidate)
        logger.debug("Removed route %s", key)
        return action

    def _snapshot(self) -> tuple[list[str], list[Action]]:
        with self._lock:
            return self._matcher.keys(), self._matcher.values()

    # -- Container protocol ----------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._matcher)

    def __contains__(self, key: object) -> bool:
        """Exact membership of a ``METHOD:pattern`` key (no glob matching)."""
        try:
            normalized = normalize_key(key)
        except InvalidRouteKey:
            return False
        with self._lock:
            return normalized in self._matcher

    def __iter__(self) -> Iterator[tuple[str, Action]]:
        keys, actions = self._snapshot()
        return iter(zip(keys, actions, strict=True))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Routes(routes={len(self)})"
