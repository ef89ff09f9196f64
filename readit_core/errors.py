"""Error kinds raised by the scraping pipeline.

Every failure reaches the awaiting caller as one of these exceptions. The only
failures that are swallowed are per-element extraction drops inside the
result extractors.
"""


class ScraperError(Exception):
    """Base class for all scraper failures."""


class InvalidQuery(ScraperError):
    """Search components could not be assembled into a well-formed URL."""


class InvalidURL(ScraperError):
    """A caller-supplied URL is not an absolute http(s) URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class TransportError(ScraperError):
    """The HTTP request failed; the underlying error is kept as ``__cause__``."""

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Request to {url} failed: {type(cause).__name__}: {cause}")
        self.url = url
        self.cause = cause


class EmptyBody(ScraperError):
    """The request succeeded but returned no bytes."""

    def __init__(self, url: str):
        super().__init__(f"No data received from {url}")
        self.url = url


class DecodeError(ScraperError):
    """The response body is not valid UTF-8."""


class MalformedMarkup(ScraperError):
    """The HTML parser could not produce a document tree."""


class NoResults(ScraperError):
    """A single-result scrape parsed the page but found nothing to extract."""

    def __init__(self, url: str):
        super().__init__(f"No results found at {url}")
        self.url = url
