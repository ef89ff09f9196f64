"""Single-attempt HTML fetching over aiohttp."""

import asyncio
from typing import Mapping, Optional

import aiohttp
import structlog

from readit_core.errors import EmptyBody, TransportError

logger = structlog.get_logger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class HTMLFetcher:
    """Fetch raw HTML with one GET per call and no retries."""

    def __init__(self, user_agent: str | None = None, timeout: float | None = None):
        """
        Initialize fetcher.

        Args:
            user_agent: Default User-Agent for every request
            timeout: Default total timeout in seconds (None uses the aiohttp default)
        """
        self.user_agent = user_agent
        self.timeout = timeout

    def _build_headers(
        self, headers: Optional[Mapping[str, str]], bypass_cache: bool
    ) -> dict[str, str]:
        merged = {"Accept": "text/html"}
        if self.user_agent:
            merged["User-Agent"] = self.user_agent
        if bypass_cache:
            merged.update(NO_CACHE_HEADERS)
        if headers:
            merged.update(headers)
        return merged

    async def fetch(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float | None = None,
        bypass_cache: bool = True,
    ) -> bytes:
        """
        Fetch a page.

        Args:
            url: Absolute URL to request
            headers: Extra headers, overriding the defaults
            timeout: Total timeout in seconds for this call
            bypass_cache: Ask every cache on the way to revalidate

        Returns:
            Raw response body

        Raises:
            TransportError: Network, TLS, timeout or HTTP status failure
            EmptyBody: The response carried no bytes
        """
        request_headers = self._build_headers(headers, bypass_cache)
        effective_timeout = timeout if timeout is not None else self.timeout

        session_kwargs = {}
        if effective_timeout is not None:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(total=effective_timeout)

        logger.debug("Fetching page", url=url, timeout=effective_timeout, bypass_cache=bypass_cache)

        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.get(url, headers=request_headers) as response:
                    response.raise_for_status()
                    body = await response.read()
                    status = response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Fetch failed", url=url, error=str(e) or type(e).__name__)
            raise TransportError(url, e) from e

        if not body:
            logger.warning("Fetch returned an empty body", url=url, status=status)
            raise EmptyBody(url)

        logger.debug("Fetch completed", url=url, status=status, content_length=len(body))
        return body
