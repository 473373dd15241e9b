"""Tests for the RSS matcher."""

import asyncio

import httpx
import pytest

from feedsearch.errors import ConfigurationError, DecodeError, PatternError, TransportError
from feedsearch.matchers import RSSMatcher
from feedsearch.models import Feed, Result

from tests.conftest import make_rss


def run(coro):
    return asyncio.run(coro)


class TestRSSMatcher:
    """Fetching, decoding and scanning RSS documents."""

    def test_feed_type(self):
        assert RSSMatcher().feed_type == "rss"

    def test_matches_title_and_description_in_order(self, rss_matcher):
        feed = Feed(type="rss", name="A", uri="http://a/feed")

        results = run(rss_matcher.search(feed, "(?i)president"))

        assert results == [
            Result(field="Title", content="President visits Ohio", feed_name="A"),
            Result(
                field="Description",
                content="Rain expected; the president cancels the rally",
                feed_name="A",
            ),
        ]

    def test_search_is_case_sensitive_by_default(self, rss_matcher):
        feed = Feed(type="rss", name="A", uri="http://a/feed")

        results = run(rss_matcher.search(feed, "president"))

        assert [r.field for r in results] == ["Description"]

    def test_no_matches(self, rss_matcher):
        feed = Feed(type="rss", name="A", uri="http://a/feed")

        assert run(rss_matcher.search(feed, "senate")) == []

    def test_missing_uri(self, rss_matcher):
        feed = Feed(type="rss", name="A", uri="")

        with pytest.raises(ConfigurationError):
            run(rss_matcher.search(feed, "president"))

    def test_http_error_status(self, rss_matcher):
        feed = Feed(type="rss", name="B", uri="http://b/feed")

        with pytest.raises(TransportError) as exc_info:
            run(rss_matcher.search(feed, "president"))

        assert exc_info.value.status_code == 404

    def test_connection_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        matcher = RSSMatcher(transport=httpx.MockTransport(handler))
        feed = Feed(type="rss", name="down", uri="http://down/feed")

        with pytest.raises(TransportError, match="connection refused"):
            run(matcher.search(feed, "president"))

    def test_undecodable_payload(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"\x00\x01 this is not a feed <<<")

        matcher = RSSMatcher(transport=httpx.MockTransport(handler))
        feed = Feed(type="rss", name="junk", uri="http://junk/feed")

        with pytest.raises(DecodeError):
            run(matcher.search(feed, "president"))

    def test_invalid_pattern(self, rss_matcher):
        feed = Feed(type="rss", name="A", uri="http://a/feed")

        with pytest.raises(PatternError):
            run(rss_matcher.search(feed, "presid(ent"))

    def test_sends_user_agent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["user_agent"] = request.headers.get("User-Agent")
            return httpx.Response(200, text=make_rss([("Hello", "World")]))

        matcher = RSSMatcher(user_agent="tests/1.0", transport=httpx.MockTransport(handler))
        feed = Feed(type="rss", name="ua", uri="http://ua/feed")

        results = run(matcher.search(feed, "Hello"))

        assert seen["user_agent"] == "tests/1.0"
        assert [r.content for r in results] == ["Hello"]
