"""Configuration management for feedsearch."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.logging import RichHandler

from feedsearch.matchers.rss import DEFAULT_USER_AGENT


DEFAULT_CONFIG_PATH = "~/.feedsearch/config.json"
DEFAULT_FEEDS_PATH = "data/data.json"
DEFAULT_TIMEOUT = 30.0
FEEDS_PATH_ENV = "FEEDSEARCH_FEEDS"


@dataclass
class Config:
    """Application configuration."""

    feeds_path: str = DEFAULT_FEEDS_PATH
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def load(cls, path: str = DEFAULT_CONFIG_PATH) -> "Config":
        """Load config from a JSON file, or return defaults if not found.

        FEEDSEARCH_FEEDS, when set, overrides the feeds path.
        """
        config_path = Path(path).expanduser()
        config = cls()

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text())
                config = cls(
                    feeds_path=data.get("feeds_path") or DEFAULT_FEEDS_PATH,
                    timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
                    user_agent=data.get("user_agent") or DEFAULT_USER_AGENT,
                )
            except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
                config = cls()

        env_feeds = os.environ.get(FEEDS_PATH_ENV)
        if env_feeds:
            config.feeds_path = env_feeds

        return config

    def save(self, path: str = DEFAULT_CONFIG_PATH) -> None:
        """Save config to a JSON file."""
        config_path = Path(path).expanduser()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "feeds_path": self.feeds_path,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
        }
        config_path.write_text(json.dumps(data, indent=2))


def setup_logging(verbose: bool = False) -> None:
    """Send log output through rich."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
