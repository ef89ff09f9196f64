"""Search path: query URL, fetch, parse, extract."""

import structlog

from readit_core.http.fetcher import HTMLFetcher
from readit_core.models import MixedResult, SearchQuery
from readit_core.parsing.document import parse_document
from readit_core.search.extractors import collect_results
from readit_core.search.query_builder import build_search_url

logger = structlog.get_logger(__name__)


class SearchService:
    """Turns a search query into mixed community and post results."""

    def __init__(self, fetcher: HTMLFetcher, search_url: str, timeout: float | None = None):
        """
        Initialize search service.

        Args:
            fetcher: Fetcher used for the results page
            search_url: Search endpoint, e.g. https://old.reddit.com/search
            timeout: Optional total timeout for the results request
        """
        self.fetcher = fetcher
        self.search_url = search_url
        self.timeout = timeout

    async def search(self, query: SearchQuery) -> list[MixedResult]:
        """
        Run a search.

        Args:
            query: Search request

        Returns:
            Ordered results; an empty list when nothing matched

        Raises:
            InvalidQuery, TransportError, EmptyBody, DecodeError, MalformedMarkup
        """
        url = build_search_url(self.search_url, query)
        logger.info("Search request", url=url, search_type=query.content_type.value or "posts")

        body = await self.fetcher.fetch(url, timeout=self.timeout)
        document = parse_document(body)
        results = collect_results(document, query.content_type)

        logger.info("Search completed", url=url, results_count=len(results))
        return results
