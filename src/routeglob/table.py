"""Human-readable listing of a route registry.

Prints one row per entry with method, pattern, and action::

    METHOD  PATTERN   ACTION
    ---------------------------------------
    GET     /blog/*   show_post(request)
    POST    /blog     create_post(request)
"""

import inspect
from collections.abc import Sequence

from routeglob.keys import split_key, strip_query
from routeglob.matching.protocol import Action


def describe_action(action: Action) -> str:
    """Return ``name(signature)`` for *action*, ``<anonymous>`` for lambdas."""
    name = getattr(action, "__qualname__", None) or getattr(action, "__name__", None)
    if not name or name.endswith("<lambda>"):
        name = "<anonymous>"
    try:
        signature = str(inspect.signature(action))
    except (TypeError, ValueError):
        signature = "(...)"
    return f"{name}{signature}"


def format_routes(keys: Sequence[str], actions: Sequence[Action]) -> str:
    """Format index-aligned *keys* and *actions* as a table."""
    if not keys:
        return "No routes registered."

    rows: list[tuple[str, str, str]] = []
    for key, action in zip(keys, actions, strict=True):
        method, pattern = split_key(key)
        rows.append((method, strip_query(pattern), describe_action(action)))

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_method}}}  {{:<{max_pattern}}}  {{}}"
    lines = [fmt.format("METHOD", "PATTERN", "ACTION")]
    sep_len = max_method + max_pattern + 4 + max(len(r[2]) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)
