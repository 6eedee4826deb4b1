import asyncio
import logging
import aiohttp
from typing import Optional, Dict, Any

from config import Config
from logging_config import get_logger


class ShortenerAPIError(Exception):
    """Raised when the shortening API call cannot be completed"""


class ShortenerAPIClient:
    """Client for the URL shortener insert API"""

    def __init__(self, config: Optional[Config] = None, logger: Optional[logging.Logger] = None):
        config = config or Config()
        self.api_url = config.SHORTENER_API_URL
        self.api_key = config.SHORTENER_API_KEY
        self.application_name = config.APPLICATION_NAME
        self.logger = logger or get_logger(__name__)

    async def _make_request(self, method: str, payload: Dict[str, Any]) -> Any:
        """Make HTTP request to the shortening API and return the decoded body"""
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.application_name,
        }
        params = {"key": self.api_key} if self.api_key else None

        # New session per call, nothing is shared between requests
        async with aiohttp.ClientSession() as session:
            try:
                async with session.request(method, self.api_url, json=payload,
                                           headers=headers, params=params) as response:
                    if response.status != 200:
                        raise ShortenerAPIError(f"API request failed: {response.status}")
                    return await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise ShortenerAPIError(f"Network error: {e}") from e
            except ValueError as e:
                raise ShortenerAPIError(f"Malformed response: {e}") from e

    async def shorten(self, long_url: str) -> Optional[str]:
        """Shorten a URL, returning None if the service gave no id"""
        short_url = None
        try:
            response = await self._make_request("POST", {"longUrl": long_url})
            if isinstance(response, dict) and response.get("id"):
                short_url = response["id"]
            else:
                self.logger.error("Unexpected shortener response: %r", response)
        except ShortenerAPIError as e:
            self.logger.error("Could not shorten %s: %s", long_url, e)

        self.logger.debug("shortUrl: %s", short_url)
        return short_url
