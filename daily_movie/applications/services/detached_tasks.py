import asyncio
from typing import Coroutine, Set

from daily_movie.domain.ports.services.logger import LoggerPort


class DetachedTaskRunner:
    """Runs fire-and-forget coroutines and logs their failures.

    Nobody awaits the result of a detached task; references are kept until the
    task finishes so it is not garbage collected mid-flight.
    """

    def __init__(self, logger: LoggerPort):
        self.logger = logger
        self._tasks: Set[asyncio.Task] = set()

    def spawn(self, coro: Coroutine, description: str) -> asyncio.Task:
        task = asyncio.create_task(coro, name=description)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def wait_all(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            self.logger.warning(f"Detached task cancelled: {task.get_name()}")
            return
        error = task.exception()
        if error is not None:
            self.logger.error(f"Detached task failed: {task.get_name()}: {error}")
