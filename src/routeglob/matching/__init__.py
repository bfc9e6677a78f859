"""Pattern matching: the glob store the route registry delegates to."""

from routeglob.matching.glob import GlobMatcher, compile_pattern, translate
from routeglob.matching.protocol import Action, PatternMatcher

__all__ = ["Action", "GlobMatcher", "PatternMatcher", "compile_pattern", "translate"]
