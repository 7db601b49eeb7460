from daily_movie.applications.services.local_clock import LocalClock
from daily_movie.applications.use_cases.recommendation.pick_today import EnsureTodayUseCase
from daily_movie.domain.exceptions import NotificationError
from daily_movie.domain.models.notification import NotificationContent
from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.notification_scheduler import NotificationScheduler

DAILY_NOTIFICATION_ID = "DailyMovieRec"


class ScheduleDailyNotificationUseCase:
    """Registers the daily alert at local `hour:minute`.

    The alert text is rendered when the job fires: it first makes sure the
    film belongs to the current local date, drawing and publishing a new one
    on the first alert of a new day.
    """

    def __init__(
        self,
        scheduler: NotificationScheduler,
        ensure_today: EnsureTodayUseCase,
        clock: LocalClock,
        logger: LoggerPort,
        identifier: str = DAILY_NOTIFICATION_ID,
        hour: int = 0,
        minute: int = 0,
    ):
        self.scheduler = scheduler
        self.ensure_today = ensure_today
        self.clock = clock
        self.logger = logger
        self.identifier = identifier
        self.hour = hour
        self.minute = minute

    async def execute(self) -> bool:
        try:
            granted = await self.scheduler.request_authorization()
        except NotificationError as e:
            self.logger.error(f"Notification permission request failed: {e}")
            return False

        if not granted:
            self.logger.info("Notification permission not granted.")
            return False

        try:
            await self.scheduler.schedule_daily(self.identifier, self.clock.at(self.hour, self.minute), self.render)
        except NotificationError as e:
            self.logger.error(f"Unable to schedule notification: {e}")
            return False
        return True

    async def render(self) -> NotificationContent:
        film = await self.ensure_today.execute()
        return NotificationContent.for_film(film)
