"""Inbound interface used by the presentation layer."""

from readit_core.errors import InvalidQuery
from readit_core.models import (
    Authorship,
    MixedResult,
    SearchQuery,
    SearchSortOption,
    SearchType,
    TopSortOption,
)
from readit_core.permalink.scraper import PermalinkScraper
from readit_core.search.service import SearchService


class RedditScraper:
    """Search and permalink scraping behind one object.

    Both operations are coroutines: failures are raised to the awaiting
    caller, and callers wanting a handle per request can wrap them in
    ``asyncio.create_task``.
    """

    def __init__(self, search_service: SearchService, permalink_scraper: PermalinkScraper):
        self.search_service = search_service
        self.permalink_scraper = permalink_scraper

    async def search(
        self,
        query: str,
        search_type: SearchType | str = SearchType.POSTS,
        sort_by: SearchSortOption | str = SearchSortOption.RELEVANCE,
        top_sort_by: TopSortOption | str = TopSortOption.ALL,
        include_over_18: bool = False,
    ) -> list[MixedResult]:
        """
        Search communities or posts.

        Args:
            query: Search text
            search_type: "" for posts, "sr" for communities, "link" for filtered posts
            sort_by: Post sort order, ignored for community searches
            top_sort_by: Post time range, ignored for community searches
            include_over_18: Include adult results

        Returns:
            Ordered mixed results

        Raises:
            InvalidQuery: If a filter or sort value is not a known option
        """
        try:
            search_query = SearchQuery(
                text=query,
                content_type=SearchType(search_type),
                sort=SearchSortOption(sort_by),
                top_range=TopSortOption(top_sort_by),
                include_adult=include_over_18,
            )
        except ValueError as e:
            raise InvalidQuery(f"Unsupported search option: {e}") from e

        return await self.search_service.search(search_query)

    async def scrape_post_title_and_author(self, url: str) -> Authorship:
        """Recover title and author for a permalink, using the lookup cache first."""
        return await self.permalink_scraper.scrape(url)
