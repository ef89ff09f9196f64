"""Scraper factory."""

import structlog

from readit_core.config.settings import Settings
from readit_core.http.fetcher import HTMLFetcher
from readit_core.permalink.cache import LookupCache, get_lookup_cache
from readit_core.permalink.scraper import PermalinkScraper
from readit_core.scraper import RedditScraper
from readit_core.search.service import SearchService

logger = structlog.get_logger(__name__)


def create_scraper(
    settings: Settings,
    fetcher: HTMLFetcher | None = None,
    cache: LookupCache | None = None,
) -> RedditScraper:
    """
    Create a scraper from configuration.

    Args:
        settings: Scraper settings
        fetcher: Fetcher override, e.g. for tests
        cache: Lookup cache override; defaults to the process-wide cache

    Returns:
        Configured RedditScraper instance
    """
    search_fetcher = fetcher or HTMLFetcher(user_agent=settings.search_user_agent)
    permalink_fetcher = fetcher or HTMLFetcher()

    logger.debug("Creating RedditScraper", search_url=settings.search_url)
    search_service = SearchService(
        fetcher=search_fetcher,
        search_url=settings.search_url,
        timeout=settings.search_timeout,
    )
    permalink_scraper = PermalinkScraper(
        fetcher=permalink_fetcher,
        cache=cache if cache is not None else get_lookup_cache(),
        user_agent=settings.permalink_user_agent,
        timeout=settings.permalink_timeout,
    )
    return RedditScraper(search_service=search_service, permalink_scraper=permalink_scraper)


def get_scraper() -> RedditScraper:
    """
    Get scraper using global settings.

    Returns:
        Configured RedditScraper instance
    """
    from readit_core.config.settings import get_settings

    return create_scraper(get_settings())
