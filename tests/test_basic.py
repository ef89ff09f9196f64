"""Basic tests for configuration and the command line."""

import io
import json
from unittest.mock import patch

import pytest

from readit_core.errors import NoResults
from readit_core.models import Authorship


def test_imports():
    """Test that all main modules can be imported."""
    from readit_core import RedditScraper, create_scraper, get_scraper
    from readit_core.config.settings import get_settings

    settings = get_settings()
    assert settings is not None
    assert RedditScraper is not None
    assert isinstance(create_scraper(settings), RedditScraper)
    assert isinstance(get_scraper(), RedditScraper)


def test_settings_defaults():
    from readit_core.config.settings import Settings

    settings = Settings()

    assert settings.search_url == "https://old.reddit.com/search"
    assert settings.permalink_timeout == 30
    assert settings.lookup_cache_max_entries is None


def test_settings_from_environment(monkeypatch):
    from readit_core.config.settings import Settings

    monkeypatch.setenv("READIT_REDDIT_BASE_URL", "https://example.test/")
    monkeypatch.setenv("READIT_SEARCH_PATH", "search")
    monkeypatch.setenv("READIT_LOOKUP_CACHE_MAX_ENTRIES", "64")

    settings = Settings()

    assert settings.search_url == "https://example.test/search"
    assert settings.lookup_cache_max_entries == 64


def test_configure_logging_debug():
    from readit_core.config.logging_config import configure_logging

    configure_logging(debug_mode=True)
    configure_logging(debug_mode=False, log_level="warning")


def test_cli_permalink_prints_json():
    from readit_core.__main__ import main

    with patch(
        "readit_core.scraper.RedditScraper.scrape_post_title_and_author",
        return_value=Authorship(title="T", author="A"),
    ):
        stdout = io.StringIO()
        with patch("sys.stdout", new=stdout):
            rc = main(["permalink", "https://old.reddit.com/r/x/comments/a/"])

    assert rc == 0
    assert json.loads(stdout.getvalue()) == {"title": "T", "author": "A"}


def test_cli_reports_error_kind():
    from readit_core.__main__ import main

    with patch(
        "readit_core.scraper.RedditScraper.scrape_post_title_and_author",
        side_effect=NoResults("https://old.reddit.com/r/x/comments/a/"),
    ):
        stdout = io.StringIO()
        with patch("sys.stdout", new=stdout):
            rc = main(["permalink", "https://old.reddit.com/r/x/comments/a/"])

    assert rc == 1
    assert json.loads(stdout.getvalue())["error"] == "NoResults"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
