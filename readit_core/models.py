"""Typed records produced by the scraper."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SearchType(str, Enum):
    """Value of the ``type`` search parameter."""

    POSTS = ""  # No filter, the site's default post search
    COMMUNITIES = "sr"
    LINKS = "link"


class SearchSortOption(str, Enum):
    """Sort order for post searches."""

    RELEVANCE = "relevance"
    HOT = "hot"
    TOP = "top"
    NEW = "new"
    COMMENTS = "comments"


class TopSortOption(str, Enum):
    """Time range for post searches."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


class PostKind(str, Enum):
    """Content category of a post, derived from its media URL."""

    IMAGE = "image"
    GIF = "gif"
    VIDEO = "video"
    GALLERY = "gallery"
    ARTICLE = "article"
    LINK = "link"
    TEXT = "text"


THUMBNAIL_KINDS = frozenset({PostKind.VIDEO, PostKind.GALLERY, PostKind.ARTICLE})


class SearchQuery(BaseModel):
    """Search request as entered by the user."""

    model_config = ConfigDict(frozen=True)

    text: str
    content_type: SearchType = SearchType.POSTS
    sort: SearchSortOption = SearchSortOption.RELEVANCE
    top_range: TopSortOption = TopSortOption.ALL
    include_adult: bool = False


class Community(BaseModel):
    """Subreddit found by a community search."""

    name: str = Field(..., min_length=1, description="Subreddit name without the r/ prefix")


class Post(BaseModel):
    """Post found by a post search.

    Counts and timestamps are kept as the display text found in the markup.
    """

    id: str = Field(default="", description="Site element identifier (data-fullname)")
    subreddit: str = Field(default="", description="Subreddit name without the r/ prefix")
    title: str = Field(default="", description="Post title")
    tag: str = Field(default="", description="Flair text")
    author: str = Field(default="", description="Author name")
    votes: str = Field(default="", description="Score as displayed")
    time: str = Field(default="", description="Value of the datetime attribute")
    media_url: str = Field(..., min_length=1, description="Linked media, or the comments URL for text posts")
    comments_url: str = Field(..., min_length=1, description="Comments permalink")
    comments_count: str = Field(default="", description="Comment count as displayed")
    kind: PostKind = Field(..., description="Classified content kind")
    thumbnail_url: Optional[str] = Field(default=None, description="Thumbnail for video, gallery and article posts")


class CommunityResult(BaseModel):
    """Community variant of a mixed search result."""

    type: Literal["community"] = "community"
    community: Community


class PostResult(BaseModel):
    """Post variant of a mixed search result."""

    type: Literal["post"] = "post"
    post: Post
    date: Optional[datetime] = None


MixedResult = Annotated[Union[CommunityResult, PostResult], Field(discriminator="type")]


class Authorship(BaseModel):
    """Title and author recovered from a permalink page."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str
