"""Shared fixtures and fake matchers for the feedsearch test suite.

Network access is replaced by httpx.MockTransport; fake matchers stand in
for real sources when exercising the coordinator.
"""

import asyncio

import httpx
import pytest

from feedsearch.matchers import Matcher, MatcherRegistry, RSSMatcher
from feedsearch.models import Feed, Result


RSS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>{title}</title>
    <link>http://example.com/</link>
    <description>Test channel</description>
    {items}
  </channel>
</rss>
"""

ITEM_TEMPLATE = """<item>
      <title>{title}</title>
      <description>{description}</description>
      <link>{link}</link>
    </item>"""


def make_rss(items: list[tuple[str, str]], title: str = "Test Feed") -> str:
    """Build an RSS document from (title, description) pairs."""
    rendered = [
        ITEM_TEMPLATE.format(title=t, description=d, link=f"http://example.com/{i}")
        for i, (t, d) in enumerate(items)
    ]
    return RSS_TEMPLATE.format(title=title, items="\n    ".join(rendered))


class StaticMatcher(Matcher):
    """Returns canned results per feed URI, optionally after a delay."""

    def __init__(self, results_by_uri: dict[str, list[Result]], delay: float = 0.0):
        self.results_by_uri = results_by_uri
        self.delay = delay
        self.searched: list[str] = []

    @property
    def feed_type(self) -> str:
        return "static"

    async def search(self, feed: Feed, search_term: str) -> list[Result]:
        self.searched.append(feed.uri)
        if self.delay:
            await asyncio.sleep(self.delay)
        return list(self.results_by_uri.get(feed.uri, []))


class FailingMatcher(Matcher):
    """Always raises the given error."""

    def __init__(self, error: Exception):
        self.error = error

    @property
    def feed_type(self) -> str:
        return "failing"

    async def search(self, feed: Feed, search_term: str) -> list[Result]:
        raise self.error


class HangingMatcher(Matcher):
    """Never returns."""

    @property
    def feed_type(self) -> str:
        return "hanging"

    async def search(self, feed: Feed, search_term: str) -> list[Result]:
        await asyncio.Event().wait()
        return []


@pytest.fixture
def registry():
    """A fresh, empty registry."""
    return MatcherRegistry()


@pytest.fixture
def rss_documents():
    """Feed documents served by the mock transport, keyed by host."""
    return {
        "a": make_rss([
            ("President visits Ohio", "Campaign stop in Columbus"),
            ("Weather update", "Rain expected; the president cancels the rally"),
            ("Sports roundup", "Local team wins"),
        ]),
    }


@pytest.fixture
def rss_transport(rss_documents):
    """Serve rss_documents by host, 404 for anything else."""

    def handler(request: httpx.Request) -> httpx.Response:
        document = rss_documents.get(request.url.host)
        if document is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=document, headers={"Content-Type": "application/rss+xml"})

    return httpx.MockTransport(handler)


@pytest.fixture
def rss_matcher(rss_transport):
    """An RSSMatcher that never touches the network."""
    return RSSMatcher(timeout=5.0, transport=rss_transport)
