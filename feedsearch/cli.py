"""Command-line interface for feedsearch."""

import asyncio
import sys

import click
from rich.console import Console
from rich.table import Table

from feedsearch.config import Config, setup_logging
from feedsearch.errors import FeedListError, PatternError
from feedsearch.feeds import load_feeds
from feedsearch.matchers import compile_pattern, create_default_registry
from feedsearch.search import display, render_result, run_search


console = Console()


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log progress for every feed")
def main(verbose: bool) -> None:
    """feedsearch - Search many feeds concurrently for a term."""
    setup_logging(verbose)


@main.command("search")
@click.argument("term")
@click.option("--feeds", "feeds_path", help="Path to the JSON feed list")
@click.option("--timeout", type=float, help="Per-feed timeout in seconds")
@click.option("-v", "--verbose", is_flag=True, help="Log progress for every feed")
def search_feeds(term: str, feeds_path: str | None, timeout: float | None, verbose: bool) -> None:
    """Search every configured feed for TERM (a regular expression)."""
    if verbose:
        setup_logging(verbose)
    config = Config.load()

    try:
        compile_pattern(term)
    except PatternError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    try:
        feeds = load_feeds(feeds_path or config.feeds_path)
    except FeedListError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if timeout is None:
        timeout = config.timeout
    registry = create_default_registry(timeout=timeout, user_agent=config.user_agent)

    async def _run() -> tuple[int, int]:
        stream = run_search(feeds, term, registry, timeout=timeout)
        count = await display(stream, lambda result: render_result(result, console))
        return count, len(stream.errors)

    count, failed = asyncio.run(_run())

    summary = f"[dim]{count} results from {len(feeds)} feeds"
    if failed:
        summary += f", {failed} failed"
    console.print(summary + "[/dim]")


@main.command("matchers")
def list_matchers() -> None:
    """List feed types that can be searched."""
    registry = create_default_registry()
    for feed_type in registry.feed_types:
        console.print(feed_type)


@main.command("feeds")
@click.option("--feeds", "feeds_path", help="Path to the JSON feed list")
def list_feeds(feeds_path: str | None) -> None:
    """List configured feeds."""
    config = Config.load()

    try:
        feeds = load_feeds(feeds_path or config.feeds_path)
    except FeedListError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    if not feeds:
        console.print("[dim]No feeds configured.[/dim]")
        return

    registry = create_default_registry()

    table = Table()
    table.add_column("Type")
    table.add_column("Site")
    table.add_column("URI")

    for feed in feeds:
        feed_type = feed.type if feed.type in registry else f"[yellow]{feed.type} (unsupported)[/yellow]"
        table.add_row(feed_type, feed.name, feed.uri)

    console.print(table)


if __name__ == "__main__":
    main()
