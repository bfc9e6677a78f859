"""PatternMatcher protocol: the storage and matching seam of the registry.

A structural protocol so ``Routes`` can hold any matcher without
coupling to the concrete type. ``GlobMatcher`` is the built-in one;
tests and applications may substitute their own.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable

# An action is any callable; the registry stores it and never calls it
Action: TypeAlias = Callable[..., Any]


@runtime_checkable
class PatternMatcher(Protocol):
    """An ordered store of pattern keys resolved by first match.

    Lookups take a concrete candidate string and consult keys in
    insertion order, returning the first key whose pattern matches.
    ``keys()`` and ``values()`` are index-aligned. ``in`` tests exact
    key membership without any pattern matching.
    """

    def add(self, key: str, value: Action) -> None: ...
    def get(self, candidate: str) -> Action | None: ...
    def match(self, candidate: str) -> str | None: ...
    def remove(self, candidate: str) -> Action | None: ...
    def has(self, candidate: str) -> bool: ...
    def clear(self) -> None: ...
    def keys(self) -> list[str]: ...
    def values(self) -> list[Action]: ...
    def __len__(self) -> int: ...
    def __contains__(self, key: object) -> bool: ...
