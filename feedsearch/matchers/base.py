"""Base protocol for feed matchers.

A matcher knows how to search one type of feed. To add a new feed type:
1. Subclass Matcher and implement feed_type and search()
2. Register an instance with a MatcherRegistry under its feed type

Example:
    class MyMatcher(Matcher):
        @property
        def feed_type(self) -> str:
            return "my_type"

        async def search(self, feed: Feed, search_term: str) -> list[Result]:
            document = await fetch(feed.uri)
            return [Result(field="Title", content=...), ...]
"""

import re
from abc import ABC, abstractmethod

from feedsearch.errors import PatternError, UnsupportedTypeError
from feedsearch.models import Feed, Result


def compile_pattern(search_term: str) -> re.Pattern:
    """Compile a search term, raising PatternError if it is invalid."""
    try:
        return re.compile(search_term)
    except re.error as e:
        raise PatternError(f"Invalid search term {search_term!r}: {e}") from e


class Matcher(ABC):
    """Interface for searching one type of feed."""

    @property
    @abstractmethod
    def feed_type(self) -> str:
        """Feed type this matcher handles (e.g., "rss")."""
        pass

    @abstractmethod
    async def search(self, feed: Feed, search_term: str) -> list[Result]:
        """Search a feed for a term.

        Args:
            feed: The feed to search. Its type matches feed_type.
            search_term: Unanchored regular expression.

        Returns:
            Results in the order fields were scanned in the source.

        Raises:
            SearchError: If the feed cannot be searched. Results gathered
                before the error are discarded.
        """
        pass


class UnsupportedMatcher(Matcher):
    """Fallback for feed types with no registered matcher."""

    @property
    def feed_type(self) -> str:
        return "unsupported"

    async def search(self, feed: Feed, search_term: str) -> list[Result]:
        raise UnsupportedTypeError(
            f"No matcher registered for feed type {feed.type!r} (feed {feed.name!r})"
        )
