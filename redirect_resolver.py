import asyncio
import logging
import aiohttp
from typing import Optional
from yarl import URL

from logging_config import get_logger


class RedirectResolver:
    """Expands a short url by reading the Location header of its response.

    Works for any shortening service since only the redirect is inspected.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger(__name__)

    @staticmethod
    def _parse(short_url: str) -> Optional[URL]:
        """Return the parsed url, or None if it cannot be requested"""
        try:
            url = URL(short_url)
        except (TypeError, ValueError):
            return None
        if url.scheme not in ("http", "https") or not url.host:
            return None
        return url

    async def resolve(self, short_url: str) -> Optional[str]:
        """Return the Location target of short_url.

        Falls back to short_url itself when the response carries no
        Location header. Returns None for malformed input or I/O errors.
        """
        long_url = None
        url = self._parse(short_url)
        if url is None:
            self.logger.warning("Malformed URL: %s", short_url)
            self.logger.debug("longUrl: %s", long_url)
            return long_url

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(url, allow_redirects=False) as response:
                    long_url = response.headers.get("Location")
            long_url = long_url if long_url is not None else short_url
        except aiohttp.InvalidURL:
            self.logger.warning("Malformed URL: %s", short_url)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            # ValueError covers hosts that fail IDNA encoding
            self.logger.error("Could not lengthen %s: %s", short_url, e)

        self.logger.debug("longUrl: %s", long_url)
        return long_url
