"""Core data models for feedsearch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Feed:
    """A named, typed source to be searched."""

    type: str  # e.g., "rss"
    name: str  # Human-readable site name
    uri: str  # Location of the source document


@dataclass(frozen=True)
class Result:
    """One matched field from a single feed."""

    field: str  # e.g., "Title", "Description"
    content: str
    feed_name: str = ""
