from abc import ABC, abstractmethod
from datetime import time
from typing import Awaitable, Callable, List

from daily_movie.domain.models.notification import NotificationContent

ContentProvider = Callable[[], Awaitable[NotificationContent]]


class NotificationScheduler(ABC):
    @abstractmethod
    async def request_authorization(self) -> bool:
        """Ask for permission to deliver alerts. May wait for the user indefinitely."""
        pass

    @abstractmethod
    async def schedule_daily(self, identifier: str, at: time, content: ContentProvider) -> None:
        """Register a repeating daily alert, replacing any alert with the same identifier."""
        pass

    @abstractmethod
    def pending_identifiers(self) -> List[str]:
        pass
