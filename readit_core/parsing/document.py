"""HTML document parsing."""

import structlog
from bs4 import BeautifulSoup, ParserRejectedMarkup

from readit_core.errors import DecodeError, MalformedMarkup

logger = structlog.get_logger(__name__)


def parse_document(body: bytes) -> BeautifulSoup:
    """
    Decode and parse an HTML response.

    Args:
        body: Raw response bytes

    Returns:
        Parsed document, queryable with CSS selectors

    Raises:
        DecodeError: If the bytes are not valid UTF-8
        MalformedMarkup: If the parser cannot build a tree at all
    """
    try:
        html = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Response is not valid UTF-8: {e}") from e

    try:
        return BeautifulSoup(html, "html.parser")
    except (ParserRejectedMarkup, RecursionError) as e:
        logger.warning("HTML parsing failed", error=str(e), content_length=len(html))
        raise MalformedMarkup(f"Could not parse HTML: {e}") from e
