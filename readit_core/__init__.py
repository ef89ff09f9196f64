"""
readit-core - scraping old Reddit search results and permalinks.

Turns server-rendered search pages into typed community and post records and
recovers a post's title and author from its permalink.
"""

__version__ = "0.1.0"

from readit_core.errors import (
    DecodeError,
    EmptyBody,
    InvalidQuery,
    InvalidURL,
    MalformedMarkup,
    NoResults,
    ScraperError,
    TransportError,
)
from readit_core.factory import create_scraper, get_scraper
from readit_core.models import (
    Authorship,
    Community,
    CommunityResult,
    MixedResult,
    Post,
    PostKind,
    PostResult,
    SearchQuery,
    SearchSortOption,
    SearchType,
    TopSortOption,
)
from readit_core.scraper import RedditScraper

__all__ = [
    "Authorship",
    "Community",
    "CommunityResult",
    "DecodeError",
    "EmptyBody",
    "InvalidQuery",
    "InvalidURL",
    "MalformedMarkup",
    "MixedResult",
    "NoResults",
    "Post",
    "PostKind",
    "PostResult",
    "RedditScraper",
    "ScraperError",
    "SearchQuery",
    "SearchSortOption",
    "SearchType",
    "TopSortOption",
    "TransportError",
    "create_scraper",
    "get_scraper",
]
