"""RouteMatch frozen dataclass."""

from dataclasses import dataclass

from routeglob.matching.protocol import Action


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup.

    ``key`` is the registered ``METHOD:pattern`` string that won, which
    is not the looked-up path when the pattern has wildcards.
    """

    method: str
    pattern: str
    key: str
    action: Action
