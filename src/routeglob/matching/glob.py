"""Glob pattern translation and the built-in ``GlobMatcher``.

Patterns follow path-globbing rules: wildcards never cross a ``/``
unless written as a whole ``**`` segment.

    ``*``       any run of characters inside one segment
                (a segment that is only ``*`` needs at least one)
    ``**``      as a whole segment: zero or more segments
    ``?``       one character other than ``/``
    ``[a-z]``   character class, ``[!a-z]`` negated
    ``{a,b}``   alternation within a segment
"""

import re

from routeglob.errors import InvalidAction, InvalidPattern
from routeglob.matching.protocol import Action

_SEGMENT_STAR = "[^/]+"
_STAR = "[^/]*"
_ONE = "[^/]"
_GLOBSTAR = "(?:[^/]*/)*"
_TRAILING_GLOBSTAR = "(?:/.*)?"


def _translate_class(segment: str, start: int) -> tuple[str, int] | None:
    """Translate a ``[...]`` class opening at *start*.

    Returns ``(regex, index_after_class)`` or ``None`` when the bracket
    is never closed and must be taken literally.
    """
    j = start + 1
    if j < len(segment) and segment[j] in "!^":
        j += 1
    if j < len(segment) and segment[j] == "]":
        j += 1
    end = segment.find("]", j)
    if end == -1:
        return None

    body = segment[start + 1 : end]
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    body = body.replace("\\", "\\\\").replace("/", "")
    body = re.sub(r"([\[\]&~|])", r"\\\1", body)
    if negate:
        return f"[^/{body}]", end + 1
    if not body:
        # A class of only "/" can never match inside a segment
        return "(?!)", end + 1
    # Ranges such as ".-0" span "/" without naming it
    return f"(?:(?!/)[{body}])", end + 1


def _translate_chars(segment: str) -> str:
    parts: list[str] = []
    i = 0
    n = len(segment)
    while i < n:
        c = segment[i]
        if c == "*":
            # Runs of stars inside a segment behave like one
            while i < n and segment[i] == "*":
                i += 1
            parts.append(_STAR)
            continue
        if c == "?":
            parts.append(_ONE)
        elif c == "[":
            translated = _translate_class(segment, i)
            if translated is not None:
                regex, i = translated
                parts.append(regex)
                continue
            parts.append(re.escape(c))
        elif c == "{":
            end = segment.find("}", i + 1)
            body = segment[i + 1 : end] if end != -1 else ""
            if end != -1 and "," in body:
                options = "|".join(_translate_chars(opt) for opt in body.split(","))
                parts.append(f"(?:{options})")
                i = end + 1
                continue
            parts.append(re.escape(c))
        else:
            parts.append(re.escape(c))
        i += 1
    return "".join(parts)


def translate(pattern: str) -> str:
    """Translate a glob *pattern* into an anchored regex source string.

    Examples::

        "/blog/*"      -> matches "/blog/42", not "/blog" or "/blog/4/2"
        "/a/**/c"      -> matches "/a/c", "/a/x/c", "/a/x/y/c"
        "/static/**"   -> matches "/static", "/static/css/app.css"
    """
    segments: list[str] = []
    for segment in pattern.split("/"):
        # Adjacent globstars match the same thing as one
        if segment == "**" and segments and segments[-1] == "**":
            continue
        segments.append(segment)
    last = len(segments) - 1
    out = ""
    for i, segment in enumerate(segments):
        if segment == "**":
            if i == last:
                if i == 0:
                    out = ".*"
                else:
                    out = out[:-1] + _TRAILING_GLOBSTAR
            else:
                out += _GLOBSTAR
            continue
        if segment == "*":
            out += _SEGMENT_STAR
        else:
            out += _translate_chars(segment)
        if i < last:
            out += "/"
    return rf"\A{out}\Z"


def compile_pattern(pattern: str, *, case_sensitive: bool = True) -> re.Pattern[str]:
    """Compile a glob *pattern* to a regex."""
    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(translate(pattern), flags)


class GlobMatcher:
    """Ordered glob store. First-registered matching key wins.

    Usage::

        matcher = GlobMatcher()
        matcher.add("GET:/blog/*", show_post)
        matcher.match("GET:/blog/42")   # "GET:/blog/*"
        matcher.get("GET:/blog/42")     # show_post

    Re-adding an existing key replaces its value without moving it.
    """

    __slots__ = ("_case_sensitive", "_entries")

    def __init__(self, *, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive
        # key -> (compiled pattern, value); dict order is registration order
        self._entries: dict[str, tuple[re.Pattern[str], Action]] = {}

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def add(self, key: str, value: Action) -> None:
        """Store *value* under the pattern *key*."""
        if not isinstance(key, str):
            raise InvalidPattern(key)
        if not callable(value):
            raise InvalidAction(value)
        entry = self._entries.get(key)
        if entry is not None:
            regex = entry[0]
        else:
            try:
                regex = compile_pattern(key, case_sensitive=self._case_sensitive)
            except re.error as exc:
                raise InvalidPattern(key, str(exc)) from exc
        self._entries[key] = (regex, value)

    def match(self, candidate: str) -> str | None:
        """Return the first key whose pattern matches *candidate*."""
        for key, (regex, _) in self._entries.items():
            if regex.match(candidate):
                return key
        return None

    def get(self, candidate: str) -> Action | None:
        key = self.match(candidate)
        if key is None:
            return None
        return self._entries[key][1]

    def remove(self, candidate: str) -> Action | None:
        """Delete the entry that *candidate* resolves to and return its value."""
        key = self.match(candidate)
        if key is None:
            return None
        _, value = self._entries.pop(key)
        return value

    def has(self, candidate: str) -> bool:
        return self.match(candidate) is not None

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)

    def values(self) -> list[Action]:
        return [value for _, value in self._entries.values()]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"GlobMatcher(keys={len(self._entries)}, case_sensitive={self._case_sensitive})"
