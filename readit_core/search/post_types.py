"""Post kind classification from media URLs."""

import re
from urllib.parse import urlsplit

from readit_core.models import PostKind

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".bmp", ".svg")
GIF_EXTENSIONS = (".gif", ".gifv")
VIDEO_EXTENSIONS = (".mp4", ".webm", ".mov")

IMAGE_HOSTS = ("i.redd.it", "i.imgur.com", "preview.redd.it")
VIDEO_HOSTS = (
    "v.redd.it",
    "youtube.com",
    "youtu.be",
    "vimeo.com",
    "streamable.com",
    "clips.twitch.tv",
    "redgifs.com",
)

COMMENTS_PATH_RE = re.compile(r"^/r/[^/]+/comments/")


def _host_matches(host: str, candidates: tuple[str, ...]) -> bool:
    return any(host == candidate or host.endswith("." + candidate) for candidate in candidates)


def classify_post_kind(media_url: str) -> PostKind:
    """
    Classify a post from the shape of its media URL.

    Unrecognized shapes map to PostKind.LINK; the function never raises.
    """
    try:
        parts = urlsplit(media_url.strip())
    except ValueError:
        return PostKind.LINK

    host = parts.netloc.lower().rsplit("@", 1)[-1].split(":", 1)[0]
    path = parts.path.lower()

    if path.endswith(GIF_EXTENSIONS):
        return PostKind.GIF
    if path.endswith(IMAGE_EXTENSIONS):
        return PostKind.IMAGE
    if "/gallery/" in path or (_host_matches(host, ("imgur.com",)) and path.startswith("/a/")):
        return PostKind.GALLERY
    if path.endswith(VIDEO_EXTENSIONS) or _host_matches(host, VIDEO_HOSTS):
        return PostKind.VIDEO
    if _host_matches(host, IMAGE_HOSTS):
        return PostKind.IMAGE
    if COMMENTS_PATH_RE.match(path) and (not host or _host_matches(host, ("reddit.com",))):
        return PostKind.TEXT
    if parts.scheme in ("http", "https") and host:
        return PostKind.ARTICLE
    return PostKind.LINK
