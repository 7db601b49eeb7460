from typing import Optional

from daily_movie.applications.services.local_clock import LocalClock
from daily_movie.applications.services.recommendation_publisher import RecommendationPublisher
from daily_movie.domain.exceptions import RepositoryError
from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.models.film import Film
from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.services.recommendation_service import RecommendationService


class PickTodayUseCase:
    """Draws today's film and publishes it. Every call draws again."""

    def __init__(
        self,
        app_state: AppState,
        recommendation_service: RecommendationService,
        publisher: RecommendationPublisher,
        clock: LocalClock,
        logger: LoggerPort,
    ):
        self.app_state = app_state
        self.recommendation_service = recommendation_service
        self.publisher = publisher
        self.clock = clock
        self.logger = logger

    async def execute(self) -> Optional[Film]:
        film = self.recommendation_service.draw(self.app_state.chosen_director_ids, self.app_state.catalog)
        if film is None:
            return None

        self.app_state.set_todays_film(film, self.clock.today())
        self.logger.info(f"Today's film: {film.title} recommended by {film.recommending_director_name}")

        try:
            await self.publisher.publish(film)
        except RepositoryError as e:
            self.logger.error(f"Could not publish today's film: {e}")
        return film


class EnsureTodayUseCase:
    """What the recommendation view runs on appear.

    Draws only when there is no film for the current local date yet.
    """

    def __init__(self, app_state: AppState, pick_today: PickTodayUseCase, clock: LocalClock):
        self.app_state = app_state
        self.pick_today = pick_today
        self.clock = clock

    async def execute(self) -> Optional[Film]:
        if self.app_state.todays_film is not None and self.app_state.todays_film_date == self.clock.today():
            return self.app_state.todays_film
        if not self.app_state.onboarding_completed:
            return None
        return await self.pick_today.execute()
