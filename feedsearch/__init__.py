"""feedsearch - Concurrent search across heterogeneous feeds."""

from feedsearch.errors import (
    ConfigurationError,
    DecodeError,
    FeedListError,
    PatternError,
    SearchError,
    StreamClosedError,
    TransportError,
    UnsupportedTypeError,
)
from feedsearch.matchers import Matcher, MatcherRegistry, create_default_registry, get_registry
from feedsearch.models import Feed, Result
from feedsearch.search import ResultStream, display, run_search

__version__ = "0.1.0"

__all__ = [
    # Data models
    "Feed",
    "Result",
    # Matchers
    "Matcher",
    "MatcherRegistry",
    "create_default_registry",
    "get_registry",
    # Search
    "ResultStream",
    "run_search",
    "display",
    # Errors
    "SearchError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "PatternError",
    "UnsupportedTypeError",
    "StreamClosedError",
    "FeedListError",
]
