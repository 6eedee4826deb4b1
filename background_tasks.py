import asyncio
import logging
from typing import Any, Coroutine, Optional, Set

from logging_config import get_logger


class BackgroundTaskManager:
    """Runs shortener operations as background asyncio tasks"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or get_logger(__name__)
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of tasks that have not finished yet"""
        return len(self._tasks)

    def submit(self, coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> asyncio.Task:
        """Schedule coro on the running loop and return its task.

        The task only starts once the caller yields to the event loop.
        """
        task = asyncio.create_task(coro, name=name)

        # The loop only keeps weak references, hold on until the task is done
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait_all(self):
        """Wait for every submitted task to finish"""
        while self._tasks:
            self.logger.debug("Waiting for %d background task(s)", len(self._tasks))
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
