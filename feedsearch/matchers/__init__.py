"""Feed matchers.

Each feed type (RSS, ...) has a matcher that knows how to fetch and search it.
See feedsearch/matchers/base.py for the Matcher protocol.
"""

from feedsearch.matchers.base import Matcher, UnsupportedMatcher, compile_pattern
from feedsearch.matchers.registry import (
    MatcherRegistry,
    create_default_registry,
    get_registry,
)
from feedsearch.matchers.rss import RSSMatcher

__all__ = [
    # Protocol
    "Matcher",
    "UnsupportedMatcher",
    "compile_pattern",
    # Registry
    "MatcherRegistry",
    "create_default_registry",
    "get_registry",
    # Built-in matchers
    "RSSMatcher",
]
