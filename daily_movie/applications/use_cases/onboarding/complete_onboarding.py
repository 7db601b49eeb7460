from daily_movie.applications.services.detached_tasks import DetachedTaskRunner
from daily_movie.applications.use_cases.notification.schedule_daily_notification import (
    ScheduleDailyNotificationUseCase,
)
from daily_movie.applications.use_cases.recommendation.pick_today import PickTodayUseCase
from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.ports.repositories.user_repository import UserRepository
from daily_movie.domain.ports.services.logger import LoggerPort


class CompleteOnboardingUseCase:
    def __init__(
        self,
        app_state: AppState,
        user_repository: UserRepository,
        pick_today: PickTodayUseCase,
        schedule_notification: ScheduleDailyNotificationUseCase,
        detached_tasks: DetachedTaskRunner,
        logger: LoggerPort,
    ):
        self.app_state = app_state
        self.user_repository = user_repository
        self.pick_today = pick_today
        self.schedule_notification = schedule_notification
        self.detached_tasks = detached_tasks
        self.logger = logger

    async def execute(self) -> bool:
        """Finish onboarding when exactly five directors are chosen, otherwise do nothing."""
        if not self.app_state.mark_onboarding_completed():
            self.logger.debug("Onboarding cannot complete with the current selection")
            return False

        selected = sorted(self.app_state.chosen_director_ids)
        self.detached_tasks.spawn(
            self.user_repository.save_selected_directors(self.app_state.user_id, selected),
            f"save selected directors for {self.app_state.user_id}",
        )
        self.logger.info(f"Onboarding completed with directors {selected}")

        await self.pick_today.execute()
        await self.schedule_notification.execute()
        return True
