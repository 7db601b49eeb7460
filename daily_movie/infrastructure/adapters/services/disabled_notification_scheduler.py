from datetime import time
from typing import List

from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.notification_scheduler import ContentProvider, NotificationScheduler


class DisabledNotificationScheduler(NotificationScheduler):
    """Used when no bot token is configured: permission is always denied."""

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    async def request_authorization(self) -> bool:
        self.logger.info("Notifications are not configured")
        return False

    async def schedule_daily(self, identifier: str, at: time, content: ContentProvider) -> None:
        self.logger.warning(f"Ignoring schedule request for {identifier}, notifications are disabled")

    def pending_identifiers(self) -> List[str]:
        return []
