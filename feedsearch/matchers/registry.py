"""Registry mapping feed types to matchers.

Matchers are registered while the program starts up and the registry is
treated as read-only once a search is dispatched.
"""

import logging

from feedsearch.matchers.base import Matcher, UnsupportedMatcher

logger = logging.getLogger(__name__)


class MatcherRegistry:
    """Registry of matchers keyed by feed type.

    Registering a type twice replaces the earlier matcher and logs a warning.
    Looking up an unknown type returns the default matcher instead of failing.
    """

    def __init__(self, default: Matcher | None = None):
        self._matchers: dict[str, Matcher] = {}
        self._default = default or UnsupportedMatcher()

    def register(self, feed_type: str, matcher: Matcher) -> None:
        """Register a matcher for a feed type."""
        existing = self._matchers.get(feed_type)
        if existing is not None and existing is not matcher:
            logger.warning(
                f"Replacing matcher for feed type {feed_type}: "
                f"{type(existing).__name__} -> {type(matcher).__name__}"
            )
        self._matchers[feed_type] = matcher
        logger.info(f"Registered matcher: {feed_type}")

    def lookup(self, feed_type: str) -> Matcher:
        """Get the matcher for a feed type, or the default matcher."""
        return self._matchers.get(feed_type, self._default)

    @property
    def default(self) -> Matcher:
        """Matcher used for unregistered feed types."""
        return self._default

    @property
    def feed_types(self) -> list[str]:
        """All registered feed types, sorted."""
        return sorted(self._matchers)

    def __contains__(self, feed_type: str) -> bool:
        return feed_type in self._matchers

    def __len__(self) -> int:
        return len(self._matchers)


def create_default_registry(timeout: float = 30.0, user_agent: str | None = None) -> MatcherRegistry:
    """Create a registry with the built-in matchers.

    Args:
        timeout: HTTP timeout in seconds for network matchers.
        user_agent: User-Agent header sent by network matchers.
    """
    from feedsearch.matchers.rss import DEFAULT_USER_AGENT, RSSMatcher

    registry = MatcherRegistry()
    matcher = RSSMatcher(timeout=timeout, user_agent=user_agent or DEFAULT_USER_AGENT)
    registry.register(matcher.feed_type, matcher)
    return registry


# Singleton registry
_registry: MatcherRegistry | None = None


def get_registry() -> MatcherRegistry:
    """Get or create the default matcher registry."""
    global _registry
    if _registry is None:
        _registry = create_default_registry()
    return _registry
