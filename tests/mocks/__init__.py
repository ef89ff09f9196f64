"""Mock objects for testing."""

from tests.mocks.mock_fetcher import MockFetcher
from tests.mocks.mock_pages import permalink_page, post_result, search_page, subreddit_result

__all__ = [
    "MockFetcher",
    "permalink_page",
    "post_result",
    "search_page",
    "subreddit_result",
]
