"""Title and author recovery from a single post permalink."""

import re
from urllib.parse import urlsplit

import structlog
from bs4 import BeautifulSoup

from readit_core.errors import InvalidURL, NoResults
from readit_core.http.fetcher import HTMLFetcher
from readit_core.models import Authorship
from readit_core.parsing.document import parse_document
from readit_core.permalink.cache import LookupCache

logger = structlog.get_logger(__name__)

TITLE_SELECTOR = "a.title"
AUTHOR_SELECTOR = "a.author"

# Page titles of comment permalinks, e.g. "<author> 님께서 <title>에 단 댓글"
KOREAN_AUTHOR_DELIMITER = " 님께서 "
KOREAN_TITLE_SUFFIX = "에 단 댓글"
ENGLISH_PAGE_TITLE_RE = re.compile(r"^(?P<author>\S+) comments on (?P<title>.+)$")


def _normalized_text(element) -> str:
    if element is None:
        return ""
    return " ".join(element.get_text(" ").split())


def authorship_from_page_title(page_title: str) -> Authorship | None:
    """Split a localized comment-page title into author and post title."""
    segments = page_title.split(KOREAN_AUTHOR_DELIMITER)
    if len(segments) >= 2:
        author = segments[0].strip()
        title = segments[1].split(KOREAN_TITLE_SUFFIX)[0].strip()
        if author and title:
            return Authorship(title=title, author=author)

    match = ENGLISH_PAGE_TITLE_RE.match(page_title)
    if match is not None and match.group("title").strip():
        return Authorship(title=match.group("title").strip(), author=match.group("author"))
    return None


def extract_authorship(document: BeautifulSoup) -> Authorship | None:
    """
    Extract title and author from a permalink page.

    Falls back to the page <title> when either primary selector is empty.
    """
    title = _normalized_text(document.select_one(TITLE_SELECTOR))
    author = _normalized_text(document.select_one(AUTHOR_SELECTOR))
    if title and author:
        return Authorship(title=title, author=author)

    page_title = _normalized_text(document.title)
    logger.debug("Primary selectors empty, trying page title", page_title=page_title)
    return authorship_from_page_title(page_title)


def is_valid_url(url: str) -> bool:
    """Check if URL is an absolute http(s) URL."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


class PermalinkScraper:
    """Recover a post's title and author from its permalink page."""

    def __init__(
        self,
        fetcher: HTMLFetcher,
        cache: LookupCache,
        user_agent: str = "readit-core/1.0",
        timeout: float = 30,
    ):
        """
        Initialize permalink scraper.

        Args:
            fetcher: Fetcher used for permalink pages
            cache: Lookup cache consulted before any request
            user_agent: User-Agent sent with permalink requests
            timeout: Total timeout per request in seconds
        """
        self.fetcher = fetcher
        self.cache = cache
        self.user_agent = user_agent
        self.timeout = timeout

    async def scrape(self, url: str) -> Authorship:
        """
        Scrape title and author for a permalink.

        Args:
            url: Post or comment permalink

        Returns:
            Cached or freshly scraped authorship

        Raises:
            InvalidURL, TransportError, EmptyBody, DecodeError, MalformedMarkup, NoResults
        """
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Permalink cache hit", url=url)
            return cached

        if not is_valid_url(url):
            raise InvalidURL(url)

        logger.info("Scraping permalink", url=url)
        body = await self.fetcher.fetch(
            url,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
        )
        document = parse_document(body)

        authorship = extract_authorship(document)
        if authorship is None:
            logger.info("No title or author found", url=url)
            raise NoResults(url)

        return self.cache.put(url, authorship)
