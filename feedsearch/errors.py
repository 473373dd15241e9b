"""Exceptions raised while searching feeds.

Per-feed errors (everything except FeedListError) are contained to the
feed that raised them: the coordinator logs them and moves on.
"""


class SearchError(Exception):
    """Base class for all feedsearch errors."""


class ConfigurationError(SearchError, ValueError):
    """A feed descriptor is malformed, e.g. it has no URI."""


class TransportError(SearchError):
    """The source could not be reached or answered with a bad status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SearchError, ValueError):
    """The source payload could not be parsed."""


class PatternError(SearchError, ValueError):
    """The search term is not a valid regular expression."""


class UnsupportedTypeError(SearchError):
    """No matcher is registered for a feed's type."""


class StreamClosedError(SearchError, RuntimeError):
    """A result was written to a stream that is already closed."""


class FeedListError(SearchError):
    """The feed list itself could not be loaded."""
