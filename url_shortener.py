"""Shortens urls and expands short urls back to their original url.

Both operations run in the background on the asyncio event loop and hand
their result to a completion callback exactly once. Failures never raise:
the callback receives None instead.
"""

import asyncio
import inspect
from typing import Any, Callable, Optional

from api_client import ShortenerAPIClient
from background_tasks import BackgroundTaskManager
from config import Config, SHORT_URL_PREFIXES
from logging_config import get_logger
from redirect_resolver import RedirectResolver

logger = get_logger(__name__)

OnShortened = Callable[[Optional[str]], Any]
OnLengthened = Callable[[Optional[str]], Any]


def is_short_url(url: str) -> bool:
    """Check if the given url is a known short url"""
    return url.startswith(SHORT_URL_PREFIXES)


class URLShortener:
    """URL shortening service using the goo.gl style insert API"""

    is_short_url = staticmethod(is_short_url)

    def __init__(
        self,
        config: Optional[Config] = None,
        client: Optional[ShortenerAPIClient] = None,
        resolver: Optional[RedirectResolver] = None,
        task_manager: Optional[BackgroundTaskManager] = None,
    ):
        config = config or Config()
        self.client = client or ShortenerAPIClient(config, logger=logger)
        self.resolver = resolver or RedirectResolver(logger=logger)
        self.tasks = task_manager or BackgroundTaskManager(logger=logger)

    def shorten_url(self, callback: OnShortened, long_url: str) -> asyncio.Task:
        """Create the shortened form of long_url.

        Returns right away; callback later receives the short url, or None
        if the service could not be reached or gave no id. The returned
        task resolves to the same value.
        """
        logger.debug("longUrl: %s", long_url)
        return self.tasks.submit(self._shorten(callback, long_url), name="shorten_url")

    def lengthen_short_url(self, callback: OnLengthened, short_url: str) -> asyncio.Task:
        """Expand short_url to the url it points to.

        Works for any shortening service since only the redirect Location is
        inspected. callback receives the target, short_url itself when there
        is no redirect, or None when short_url is malformed or unreachable.
        """
        logger.debug("shortUrl: %s", short_url)
        return self.tasks.submit(self._lengthen(callback, short_url), name="lengthen_short_url")

    async def _shorten(self, callback: OnShortened, long_url: str) -> Optional[str]:
        try:
            short_url = await self.client.shorten(long_url)
        except Exception:
            logger.exception("Shortening %s failed", long_url)
            short_url = None
        await self._notify(callback, short_url)
        return short_url

    async def _lengthen(self, callback: OnLengthened, short_url: str) -> Optional[str]:
        try:
            long_url = await self.resolver.resolve(short_url)
        except Exception:
            logger.exception("Lengthening %s failed", short_url)
            long_url = None
        await self._notify(callback, long_url)
        return long_url

    @staticmethod
    async def _notify(callback: Callable[[Optional[str]], Any], value: Optional[str]):
        try:
            result = callback(value)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Completion callback failed")

    async def close(self):
        """Wait for in-flight operations to deliver their results"""
        await self.tasks.wait_all()
