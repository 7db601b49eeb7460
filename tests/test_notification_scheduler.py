from datetime import time, timezone
from unittest.mock import AsyncMock, Mock

import pytest
from telegram.error import BadRequest, Forbidden, NetworkError
from telegram.ext import Application

from daily_movie.domain.exceptions import ConfigurationError, NotificationError
from daily_movie.domain.models.notification import NotificationContent
from daily_movie.infrastructure.adapters.services.disabled_notification_scheduler import DisabledNotificationScheduler
from daily_movie.infrastructure.adapters.services.telegram_notification_scheduler import (
    TelegramNotificationScheduler,
)
from daily_movie.infrastructure.config.container import build_notification_scheduler
from daily_movie.infrastructure.config.settings import NotificationSettings

MIDNIGHT = time(0, 0, tzinfo=timezone.utc)


class FakeJob:
    def __init__(self, callback, name, chat_id, data, at):
        self.callback = callback
        self.name = name
        self.chat_id = chat_id
        self.data = data
        self.time = at
        self.removed = False

    def schedule_removal(self):
        self.removed = True


class FakeJobQueue:
    """In-memory stand-in for the bot's job queue"""

    def __init__(self):
        self._jobs = []

    def run_daily(self, callback, time, name=None, chat_id=None, data=None):
        job = FakeJob(callback, name, chat_id, data, time)
        self._jobs.append(job)
        return job

    def get_jobs_by_name(self, name):
        return tuple(job for job in self._jobs if job.name == name and not job.removed)

    def jobs(self):
        return tuple(self._jobs)


@pytest.fixture
def application():
    application = Mock(spec=Application)
    application.job_queue = FakeJobQueue()
    application.bot = AsyncMock()
    return application


@pytest.fixture
def scheduler(application, mock_logger):
    return TelegramNotificationScheduler(application, 4242, mock_logger)


async def fallback_content():
    return NotificationContent.for_film(None)


class TestTelegramNotificationScheduler:
    def test_requires_job_queue(self, application, mock_logger):
        application.job_queue = None

        with pytest.raises(ConfigurationError):
            TelegramNotificationScheduler(application, 4242, mock_logger)

    @pytest.mark.asyncio
    async def test_authorization_granted_when_chat_reachable(self, scheduler, application):
        assert await scheduler.request_authorization() is True
        application.bot.get_chat.assert_awaited_once_with(4242)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [Forbidden("bot was blocked by the user"), BadRequest("Chat not found")])
    async def test_authorization_denied(self, scheduler, application, error):
        application.bot.get_chat.side_effect = error

        assert await scheduler.request_authorization() is False

    @pytest.mark.asyncio
    async def test_authorization_transport_error_raises(self, scheduler, application):
        application.bot.get_chat.side_effect = NetworkError("connection reset")

        with pytest.raises(NotificationError):
            await scheduler.request_authorization()

    @pytest.mark.asyncio
    async def test_registering_twice_keeps_one_job(self, scheduler, application):
        """Test re-registration replaces the pending job instead of adding one"""
        await scheduler.schedule_daily("DailyMovieRec", MIDNIGHT, fallback_content)
        await scheduler.schedule_daily("DailyMovieRec", MIDNIGHT, fallback_content)

        assert scheduler.pending_identifiers() == ["DailyMovieRec"]
        live = application.job_queue.get_jobs_by_name("DailyMovieRec")
        assert len(live) == 1
        assert live[0].time == MIDNIGHT
        assert live[0].chat_id == 4242

    @pytest.mark.asyncio
    async def test_other_identifiers_are_untouched(self, scheduler):
        await scheduler.schedule_daily("DailyMovieRec", MIDNIGHT, fallback_content)
        await scheduler.schedule_daily("Other", MIDNIGHT, fallback_content)

        assert sorted(scheduler.pending_identifiers()) == ["DailyMovieRec", "Other"]

    @pytest.mark.asyncio
    async def test_delivery_renders_content_at_fire_time(self, scheduler, application):
        await scheduler.schedule_daily("DailyMovieRec", MIDNIGHT, fallback_content)
        job = application.job_queue.get_jobs_by_name("DailyMovieRec")[0]
        context = Mock()
        context.job = job
        context.bot.send_message = AsyncMock()

        await job.callback(context)

        context.bot.send_message.assert_awaited_once_with(
            chat_id=4242, text="🎬 Daily Movie Recommendation\nCheck out today's director-picked movie!"
        )

    @pytest.mark.asyncio
    async def test_delivery_failure_is_logged(self, scheduler, application, mock_logger):
        await scheduler.schedule_daily("DailyMovieRec", MIDNIGHT, fallback_content)
        job = application.job_queue.get_jobs_by_name("DailyMovieRec")[0]
        context = Mock()
        context.job = job
        context.bot.send_message = AsyncMock(side_effect=NetworkError("timeout"))

        await job.callback(context)

        mock_logger.exception.assert_called_once()


class TestDisabledNotificationScheduler:
    @pytest.mark.asyncio
    async def test_permission_is_denied(self, mock_logger):
        scheduler = DisabledNotificationScheduler(mock_logger)

        assert await scheduler.request_authorization() is False
        assert scheduler.pending_identifiers() == []

    def test_container_falls_back_without_token(self, mock_logger):
        scheduler, application = build_notification_scheduler(
            NotificationSettings(bot_token=None, chat_id=None), mock_logger
        )

        assert isinstance(scheduler, DisabledNotificationScheduler)
        assert application is None
