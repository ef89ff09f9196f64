"""Mock HTML fetcher for testing."""


class MockFetcher:
    """Serves canned bodies and records every request."""

    def __init__(self, pages: dict[str, bytes] | None = None, default: bytes | None = None, error: Exception | None = None):
        """
        Args:
            pages: Dict mapping URLs to response bodies
            default: Body returned for URLs not in pages
            error: Exception raised for every request instead of returning a body
        """
        self.pages = pages or {}
        self.default = default
        self.error = error
        self.calls: list[dict] = []

    @property
    def fetch_count(self) -> int:
        return len(self.calls)

    async def fetch(self, url: str, headers=None, timeout=None, bypass_cache: bool = True) -> bytes:
        """Mock fetch operation."""
        self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})

        if self.error is not None:
            raise self.error
        if url in self.pages:
            return self.pages[url]
        if self.default is not None:
            return self.default
        raise KeyError(f"No mock page for {url}")
