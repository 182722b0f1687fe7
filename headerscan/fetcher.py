# headerscan/fetcher.py
import asyncio
from typing import Optional
import aiohttp
from .config import REQUEST_TIMEOUT, USER_AGENT
import logging

logger = logging.getLogger(__name__)

MAX_HEADER_SIZE = 1024 * 1024


class FetchError(Exception):
    """Raised when the headers for a URL could not be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


def normalize_url(url: str) -> str:
    if not url.lower().startswith(("http://", "https://")):
        return "http://" + url
    return url


class Fetcher:
    def __init__(
        self,
        skip_ssl: bool = False,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        user_agent: Optional[str] = None,
    ):
        # certificate checks stay at aiohttp's default unless explicitly skipped
        connector = aiohttp.TCPConnector(ssl=False) if skip_ssl else aiohttp.TCPConnector()
        # aiohttp's 8190 byte default rejects long Content-Security-Policy values
        kwargs = {"max_line_size": MAX_HEADER_SIZE, "max_field_size": MAX_HEADER_SIZE}
        if timeout:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
        self._client = aiohttp.ClientSession(connector=connector, **kwargs)
        self._user_agent = user_agent or USER_AGENT
        self.skip_ssl = skip_ssl

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def get_headers(self, url: str):
        """GET ``url`` once and return its case-insensitive header mapping."""
        target = normalize_url(url)
        logger.debug("GET %s (skip_ssl=%s)", target, self.skip_ssl)
        try:
            async with self._client.get(target, headers={"User-Agent": self._user_agent}) as resp:
                logger.debug("%s -> %s", target, resp.status)
                return resp.headers
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise FetchError(url, str(e) or e.__class__.__name__) from e

    async def close(self):
        await self._client.close()
