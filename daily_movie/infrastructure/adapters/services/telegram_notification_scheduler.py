from datetime import time
from typing import List

from telegram.error import BadRequest, Forbidden, TelegramError
from telegram.ext import Application, ContextTypes

from daily_movie.domain.exceptions import ConfigurationError, NotificationError
from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.notification_scheduler import ContentProvider, NotificationScheduler


class TelegramNotificationScheduler(NotificationScheduler):
    """Daily alerts delivered as Telegram messages through the bot's job queue.

    Jobs are keyed by name: scheduling an identifier that is already queued
    removes the old job first, so there is at most one job per identifier.
    """

    def __init__(self, application: Application, chat_id: int, logger: LoggerPort):
        if application.job_queue is None:
            raise ConfigurationError("python-telegram-bot was installed without the job-queue extra")
        self.application = application
        self.chat_id = chat_id
        self.logger = logger

    async def request_authorization(self) -> bool:
        try:
            await self.application.bot.get_chat(self.chat_id)
        except (Forbidden, BadRequest) as e:
            self.logger.info(f"Chat {self.chat_id} is not reachable by the bot: {e}")
            return False
        except TelegramError as e:
            raise NotificationError(f"Could not check chat {self.chat_id}: {e}") from e
        return True

    async def schedule_daily(self, identifier: str, at: time, content: ContentProvider) -> None:
        job_queue = self.application.job_queue
        for job in job_queue.get_jobs_by_name(identifier):
            job.schedule_removal()

        job_queue.run_daily(
            self._deliver,
            time=at,
            name=identifier,
            chat_id=self.chat_id,
            data=content,
        )
        self.logger.info(f"Scheduled daily notification {identifier} at {at.isoformat()}")

    def pending_identifiers(self) -> List[str]:
        return [job.name for job in self.application.job_queue.jobs() if job.name and not job.removed]

    async def _deliver(self, context: ContextTypes.DEFAULT_TYPE) -> None:
        job = context.job
        try:
            content = await job.data()
            await context.bot.send_message(chat_id=job.chat_id, text=content.as_message())
        except TelegramError:
            self.logger.exception(f"Unable to deliver notification {job.name}")
