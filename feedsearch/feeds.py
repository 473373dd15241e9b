"""Loading the list of feeds to search."""

import json
import logging
from pathlib import Path

from feedsearch.errors import FeedListError
from feedsearch.models import Feed

logger = logging.getLogger(__name__)


def _parse_feed(entry: object, index: int) -> Feed:
    """Build a Feed from one JSON entry.

    Accepts {"site", "link", "type"} and the {"name", "uri", "type"} aliases.
    """
    if not isinstance(entry, dict):
        raise FeedListError(f"Feed entry {index} is not an object")

    feed_type = entry.get("type")
    if not feed_type:
        raise FeedListError(f"Feed entry {index} has no type")

    return Feed(
        type=str(feed_type),
        name=str(entry.get("site", entry.get("name", ""))),
        uri=str(entry.get("link", entry.get("uri", ""))),
    )


def parse_feeds(data: object) -> list[Feed]:
    """Convert decoded JSON into feeds."""
    if not isinstance(data, list):
        raise FeedListError("Feed list must be a JSON array")
    return [_parse_feed(entry, i) for i, entry in enumerate(data)]


def load_feeds(path: str | Path) -> list[Feed]:
    """Load feeds from a JSON file.

    Raises:
        FeedListError: If the file is missing or is not a valid feed list.
    """
    feeds_path = Path(path).expanduser()

    try:
        data = json.loads(feeds_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise FeedListError(f"Feed list not found: {feeds_path}") from e
    except OSError as e:
        raise FeedListError(f"Cannot read feed list {feeds_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise FeedListError(f"Feed list {feeds_path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise FeedListError(f"Invalid JSON in {feeds_path}: {e}") from e

    feeds = parse_feeds(data)
    logger.info(f"Loaded {len(feeds)} feeds from {feeds_path}")
    return feeds
