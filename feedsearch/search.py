"""Concurrent search across feeds.

run_search() starts one task per feed and returns a ResultStream right away.
Every task pushes its results onto the shared stream; a supervising task
closes the stream once all of them have finished, so consumers simply do:

    stream = run_search(feeds, "president", registry)
    async for result in stream:
        ...
"""

import asyncio
import logging
from functools import partial
from typing import Callable

from rich.console import Console

from feedsearch.errors import StreamClosedError, TransportError, UnsupportedTypeError
from feedsearch.matchers.base import Matcher
from feedsearch.matchers.registry import MatcherRegistry, get_registry
from feedsearch.models import Feed, Result

logger = logging.getLogger(__name__)

_CLOSED = object()


class ResultStream:
    """Multi-producer, single-consumer stream of results.

    The stream is closed exactly once; writing after that raises
    StreamClosedError. Iterating stops when the stream is closed and drained.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False
        self._supervisor: asyncio.Task | None = None
        self.errors: list[tuple[Feed, Exception]] = []

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, result: Result) -> None:
        """Add a result to the stream."""
        if self._closed:
            raise StreamClosedError(f"Result stream is closed, dropping {result.field} result")
        self._queue.put_nowait(result)

    def close(self) -> None:
        """Close the stream. Closing an already closed stream does nothing."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> "ResultStream":
        return self

    async def __anext__(self) -> Result:
        item = await self._queue.get()
        if item is _CLOSED:
            # Leave the marker in place so later iterations also stop
            self._queue.put_nowait(_CLOSED)
            raise StopAsyncIteration
        return item

    async def wait_closed(self) -> None:
        """Wait until every search task has finished and the stream is closed."""
        if self._supervisor is not None:
            await self._supervisor

    def attach_supervisor(self, supervisor: asyncio.Task) -> None:
        """Set the task that closes this stream, for wait_closed()."""
        self._supervisor = supervisor


async def _search_feed(
    matcher: Matcher,
    feed: Feed,
    search_term: str,
    stream: ResultStream,
    timeout: float | None,
) -> None:
    """Search a single feed with error handling."""
    try:
        if timeout is None:
            results = await matcher.search(feed, search_term)
        else:
            try:
                results = await asyncio.wait_for(matcher.search(feed, search_term), timeout)
            except asyncio.TimeoutError as e:
                raise TransportError(f"Timed out after {timeout}s searching {feed.uri}") from e
    except UnsupportedTypeError as e:
        logger.warning(f"Skipping feed {feed.name}: {e}")
        stream.errors.append((feed, e))
        return
    except Exception as e:
        logger.warning(f"Search failed for {feed.name}: {e}")
        stream.errors.append((feed, e))
        return

    for result in results:
        stream.put(result)


async def _supervise(feeds: list[Feed], tasks: list[asyncio.Task], stream: ResultStream) -> None:
    """Close the stream once every search task has returned."""
    try:
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        for feed, outcome in zip(feeds, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"Search task for {feed.name} crashed: {outcome!r}")
                stream.errors.append((feed, outcome))
    finally:
        stream.close()
        logger.info(f"Searched {len(tasks)} feeds, {len(stream.errors)} failed")


def run_search(
    feeds: list[Feed],
    search_term: str,
    registry: MatcherRegistry | None = None,
    timeout: float | None = None,
) -> ResultStream:
    """Search every feed concurrently.

    Must be called from a running event loop.

    Args:
        feeds: Feeds to search.
        search_term: Regular expression to look for.
        registry: Matchers to use, defaults to the global registry.
        timeout: Optional per-feed limit in seconds. A feed that takes
            longer is treated as a transport failure.

    Returns:
        A ResultStream that is closed after all feeds have been searched.
    """
    loop = asyncio.get_running_loop()
    if registry is None:
        registry = get_registry()

    stream = ResultStream()
    tasks = []
    for feed in feeds:
        matcher = registry.lookup(feed.type)
        tasks.append(loop.create_task(_search_feed(matcher, feed, search_term, stream, timeout)))

    stream.attach_supervisor(loop.create_task(_supervise(feeds, tasks, stream)))
    return stream


async def search(
    feeds: list[Feed],
    search_term: str,
    registry: MatcherRegistry | None = None,
    timeout: float | None = None,
) -> list[Result]:
    """Search every feed and collect all results into a list."""
    stream = run_search(feeds, search_term, registry, timeout)
    return [result async for result in stream]


def render_result(result: Result, console: Console | None = None) -> None:
    """Print a single result."""
    console = console or Console()
    console.print(f"{result.field}:\n{result.content}\n", markup=False, highlight=False)


async def display(
    stream: ResultStream,
    sink: Callable[[Result], None] | None = None,
) -> int:
    """Render every result in the stream until it is closed.

    Returns:
        Number of results rendered.
    """
    if sink is None:
        sink = partial(render_result, console=Console())

    count = 0
    async for result in stream:
        sink(result)
        count += 1
    return count
