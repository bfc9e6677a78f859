"""Canonical HTTP methods accepted by the registry.

Input is case-insensitive; everything stored or compared is one of the
five uppercase strings below.
"""

from typing import Any, Final

from routeglob.errors import InvalidMethod

POST: Final = "POST"
GET: Final = "GET"
PUT: Final = "PUT"
PATCH: Final = "PATCH"
DELETE: Final = "DELETE"

# Ordered as listed in error messages
METHODS: Final[tuple[str, ...]] = (POST, GET, PUT, PATCH, DELETE)


def validate_method(raw: Any) -> str:
    """Return the canonical uppercase form of *raw*.

    Raises ``InvalidMethod`` if *raw* is not a non-empty string or does
    not name one of ``METHODS``.
    """
    if not isinstance(raw, str) or not raw:
        raise InvalidMethod(raw, METHODS)
    method = raw.upper()
    if method not in METHODS:
        raise InvalidMethod(raw, METHODS)
    return method
