"""Extraction of communities and posts from search result pages.

Extraction is best-effort: an element that cannot be turned into a record is
dropped and logged, and a page whose containers cannot be selected yields an
empty list.
"""

import re
from typing import Optional

import structlog
from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from readit_core.models import (
    THUMBNAIL_KINDS,
    Community,
    CommunityResult,
    MixedResult,
    Post,
    PostResult,
    SearchType,
)
from readit_core.search.post_types import classify_post_kind

logger = structlog.get_logger(__name__)

COMMUNITY_RESULT_SELECTOR = "div.search-result-subreddit"
POST_RESULT_SELECTOR = "div.search-result-link"
SUBREDDIT_LINK_SELECTOR = "a.search-subreddit-link.may-blank"
TITLE_SELECTOR = "a.search-title.may-blank"
FLAIR_SELECTOR = "span.linkflairlabel"
AUTHOR_SELECTOR = "span.search-author a"
SCORE_SELECTOR = "span.search-score"
TIME_SELECTOR = "span.search-time time"
COMMENTS_SELECTOR = "a.search-comments.may-blank"
FOOTER_SELECTOR = "div.search-result-footer"
MEDIA_LINK_SELECTOR = "a.search-link.may-blank"
THUMBNAIL_SELECTOR = "a.thumbnail img"

SUBREDDIT_PREFIX_RE = re.compile(r"^(r/|/r/)")


class ExtractionError(ValueError):
    """A single result element could not be converted into a record."""


def _text(element: Tag, selector: str) -> str:
    """Whitespace-normalized text of every match, joined by single spaces."""
    texts = (" ".join(match.get_text(" ").split()) for match in element.select(selector))
    return " ".join(text for text in texts if text)


def _first_text(element: Tag, selector: str) -> str:
    match = element.select_one(selector)
    if match is None:
        return ""
    return " ".join(match.get_text(" ").split())


def _attr(element: Tag, selector: str, name: str) -> str:
    """Value of ``name`` on the first match that carries it."""
    for match in element.select(selector):
        value = match.get(name)
        if value is not None:
            return value if isinstance(value, str) else " ".join(value)
    return ""


def clean_subreddit_name(raw: str) -> str:
    """Strip a leading r/ or /r/ from a subreddit label."""
    return SUBREDDIT_PREFIX_RE.sub("", raw.strip())


def normalize_thumbnail_url(src: str) -> Optional[str]:
    """Give protocol-relative thumbnail URLs an explicit https scheme."""
    src = src.strip()
    if not src:
        return None
    if src.startswith("//"):
        return "https:" + src
    return src


def _select_containers(document: BeautifulSoup, selector: str) -> list[Tag]:
    try:
        return document.select(selector)
    except Exception as e:
        logger.warning("Result container selection failed", selector=selector, error=str(e))
        return []


def parse_community_element(element: Tag) -> Community:
    """Build a Community from one subreddit search result element."""
    link_text = _text(element, SUBREDDIT_LINK_SELECTOR)
    segments = [segment for segment in link_text.split("/") if segment.strip()]
    if not segments:
        raise ExtractionError("Subreddit result without a subreddit link")
    return Community(name=segments[-1].strip())


def extract_communities(document: BeautifulSoup) -> list[Community]:
    """
    Extract subreddit results from a search page.

    Args:
        document: Parsed search results page

    Returns:
        Communities in page order; malformed elements are skipped
    """
    communities = []
    for index, element in enumerate(_select_containers(document, COMMUNITY_RESULT_SELECTOR)):
        try:
            communities.append(parse_community_element(element))
        except (ExtractionError, ValidationError) as e:
            logger.debug("Skipping subreddit result", index=index, error=str(e))
        except Exception as e:
            logger.warning("Error parsing subreddit element", index=index, error=str(e))

    logger.debug("Extracted communities", count=len(communities))
    return communities


def parse_post_element(element: Tag) -> Post:
    """Build a Post from one post search result element."""
    comments_url = _attr(element, COMMENTS_SELECTOR, "href")
    comments_text = _text(element, COMMENTS_SELECTOR)
    comments_count = comments_text.split()[0] if comments_text.split() else ""

    # Text posts have no media link of their own
    media_url = ""
    footer = element.select_one(FOOTER_SELECTOR)
    if footer is not None:
        media_url = _attr(footer, MEDIA_LINK_SELECTOR, "href")
    if not media_url:
        media_url = comments_url

    kind = classify_post_kind(media_url)

    thumbnail_url = None
    if kind in THUMBNAIL_KINDS:
        thumbnail = element.select_one(THUMBNAIL_SELECTOR)
        if thumbnail is not None:
            thumbnail_url = normalize_thumbnail_url(thumbnail.get("src") or "")

    return Post(
        id=element.get("data-fullname") or "",
        subreddit=clean_subreddit_name(_text(element, SUBREDDIT_LINK_SELECTOR)),
        title=_text(element, TITLE_SELECTOR),
        tag=_first_text(element, FLAIR_SELECTOR),
        author=_text(element, AUTHOR_SELECTOR),
        votes=_text(element, SCORE_SELECTOR),
        time=_attr(element, TIME_SELECTOR, "datetime"),
        media_url=media_url,
        comments_url=comments_url,
        comments_count=comments_count,
        kind=kind,
        thumbnail_url=thumbnail_url,
    )


def extract_posts(document: BeautifulSoup) -> list[Post]:
    """
    Extract post results from a search page.

    Args:
        document: Parsed search results page

    Returns:
        Posts in page order; elements that fail to parse are dropped
    """
    posts = []
    for index, element in enumerate(_select_containers(document, POST_RESULT_SELECTOR)):
        try:
            posts.append(parse_post_element(element))
        except Exception as e:
            logger.warning(
                "Error parsing post element",
                index=index,
                fullname=element.get("data-fullname"),
                error=str(e),
            )

    logger.debug("Extracted posts", count=len(posts))
    return posts


def collect_results(document: BeautifulSoup, search_type: SearchType) -> list[MixedResult]:
    """Run the extractor matching the search type and wrap its records."""
    results: list[MixedResult] = []

    if search_type == SearchType.COMMUNITIES:
        results.extend(CommunityResult(community=community) for community in extract_communities(document))
    elif search_type in (SearchType.POSTS, SearchType.LINKS):
        results.extend(PostResult(post=post, date=None) for post in extract_posts(document))

    return results
