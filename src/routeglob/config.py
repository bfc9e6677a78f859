"""Registry configuration.

RoutesConfig is a frozen dataclass, immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """Options for a ``Routes`` registry. Immutable after creation.

    Override what you need::

        config = RoutesConfig(warn_on_duplicate=False)
    """

    # Log a warning when a METHOD:pattern pair is registered twice.
    # The second registration is ignored either way.
    warn_on_duplicate: bool = True

    # Passed to the default GlobMatcher; ignored when a matcher is injected
    case_sensitive: bool = True
