from daily_movie.domain.exceptions import RepositoryError
from daily_movie.domain.models.film import Film
from daily_movie.domain.models.published_recommendation import (
    FALLBACK_LETTERBOXD_URL,
    FALLBACK_TITLE,
    FALLBACK_YEAR,
    PublishedRecommendation,
)
from daily_movie.domain.ports.repositories.shared_defaults_repository import SharedDefaultsRepository
from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.widget_center import WidgetCenter
from daily_movie.domain.services.deep_link import is_web_url

TITLE_KEY = "recTitle"
YEAR_KEY = "recYear"
ORIGINAL_DIRECTOR_KEY = "recOriginalDirector"
RECOMMENDER_KEY = "recRecommender"
LETTERBOXD_URL_KEY = "recLetterboxdURL"


class RecommendationPublisher:
    """Copies today's film into the shared suite read by the widget host"""

    def __init__(self, shared_defaults: SharedDefaultsRepository, widget_center: WidgetCenter, logger: LoggerPort):
        self.shared_defaults = shared_defaults
        self.widget_center = widget_center
        self.logger = logger

    async def publish(self, film: Film) -> None:
        record = PublishedRecommendation.from_film(film)
        await self.shared_defaults.set(TITLE_KEY, record.title)
        await self.shared_defaults.set(YEAR_KEY, record.year)
        await self.shared_defaults.set(ORIGINAL_DIRECTOR_KEY, record.original_director)
        await self.shared_defaults.set(RECOMMENDER_KEY, record.recommending_director)
        await self.shared_defaults.set(LETTERBOXD_URL_KEY, record.letterboxd_url)
        self.logger.info(f"Published recommendation: {record.title} ({record.year})")

        try:
            await self.widget_center.reload_all_timelines()
        except RepositoryError as e:
            self.logger.warning(f"Could not signal widget reload: {e}")


class PublishedRecommendationReader:
    """Read side of the shared suite; absent keys fall back to fixed defaults."""

    def __init__(self, shared_defaults: SharedDefaultsRepository):
        self.shared_defaults = shared_defaults

    async def read(self) -> PublishedRecommendation:
        title = await self.shared_defaults.get_string(TITLE_KEY)
        year = await self.shared_defaults.get_int(YEAR_KEY)
        original_director = await self.shared_defaults.get_string(ORIGINAL_DIRECTOR_KEY)
        recommender = await self.shared_defaults.get_string(RECOMMENDER_KEY)
        url = await self.shared_defaults.get_string(LETTERBOXD_URL_KEY)

        return PublishedRecommendation(
            title=title if title is not None else FALLBACK_TITLE,
            year=year if year is not None else FALLBACK_YEAR,
            original_director=original_director or "",
            recommending_director=recommender or "",
            letterboxd_url=url if url is not None and is_web_url(url) else FALLBACK_LETTERBOXD_URL,
        )
