"""RSS/Atom feed matcher."""

import logging

import feedparser
import httpx

from feedsearch.errors import ConfigurationError, DecodeError, TransportError
from feedsearch.matchers.base import Matcher, compile_pattern
from feedsearch.models import Feed, Result

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "feedsearch/0.1"


class RSSMatcher(Matcher):
    """Matcher for RSS and Atom feeds.

    Each item's title and description are checked against the search term,
    in document order.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport

    @property
    def feed_type(self) -> str:
        return "rss"

    async def retrieve(self, feed: Feed) -> feedparser.FeedParserDict:
        """Fetch and decode the feed document."""
        if not feed.uri:
            raise ConfigurationError(f"No RSS feed URI provided for {feed.name!r}")

        async with httpx.AsyncClient(
            transport=self._transport,
            follow_redirects=True,
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
        ) as client:
            try:
                response = await client.get(feed.uri)
            except httpx.HTTPError as e:
                raise TransportError(f"Failed to fetch {feed.uri}: {e}") from e

        if response.status_code != 200:
            raise TransportError(
                f"HTTP response error {response.status_code} from {feed.uri}",
                status_code=response.status_code,
            )

        document = feedparser.parse(response.content)
        if document.bozo and not document.entries:
            raise DecodeError(f"Invalid feed at {feed.uri}: {document.get('bozo_exception')}")
        return document

    async def search(self, feed: Feed, search_term: str) -> list[Result]:
        logger.info(f"Search Feed Type[{feed.type}] Site[{feed.name}] For URI[{feed.uri}]")

        pattern = compile_pattern(search_term)
        document = await self.retrieve(feed)

        results = []
        for entry in document.entries:
            title = entry.get("title", "")
            if pattern.search(title):
                results.append(Result(field="Title", content=title, feed_name=feed.name))

            description = entry.get("summary", "")
            if pattern.search(description):
                results.append(Result(field="Description", content=description, feed_name=feed.name))

        return results
