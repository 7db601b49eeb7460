import asyncio
from datetime import datetime
from typing import Optional

from daily_movie.applications.services.local_clock import LocalClock
from daily_movie.applications.services.recommendation_publisher import PublishedRecommendationReader
from daily_movie.applications.services.widget_timeline_provider import WidgetTimelineProvider
from daily_movie.domain.exceptions import RepositoryError
from daily_movie.domain.ports.repositories.shared_defaults_repository import SharedDefaultsRepository
from daily_movie.domain.models.widget_entry import WidgetEntry
from daily_movie.infrastructure.adapters.repositories.sqlalchemy_shared_defaults_repository import (
    SQLAlchemySharedDefaultsRepository,
)
from daily_movie.infrastructure.adapters.services.shared_defaults_widget_center import RELOAD_REQUESTED_KEY
from daily_movie.infrastructure.config.settings import Settings, WidgetSettings
from daily_movie.infrastructure.logging.logger import Logger, setup_logging
from daily_movie.infrastructure.persistence.database import (
    create_shared_tables,
    dispose_engine,
    get_sessionmaker,
    get_shared_engine,
)
from daily_movie.presentation.widget.view import render_card

logger = Logger.get_logger(__name__)


class WidgetHost:
    """Independent widget process: renders on its own daily timeline.

    It wakes at the timeline's refresh time (next local midnight) or earlier
    when the app has left a reload marker newer than the last render.
    """

    def __init__(
        self,
        provider: WidgetTimelineProvider,
        shared_defaults: SharedDefaultsRepository,
        clock: LocalClock,
        settings: WidgetSettings,
    ):
        self.provider = provider
        self.shared_defaults = shared_defaults
        self.clock = clock
        self.settings = settings
        self._last_reload_marker: Optional[str] = None

    def show(self, entry: WidgetEntry) -> None:
        card = render_card(entry)
        logger.info(f"[{self.settings.kind}] " + " | ".join(card.lines()) + f" -> {card.widget_url}")

    async def render_once(self) -> datetime:
        if self.settings.is_preview:
            self.show(await self.provider.snapshot(is_preview=True))
            return self.clock.next_midnight()

        timeline = await self.provider.timeline()
        for entry in timeline.entries:
            self.show(entry)
        return timeline.refresh_after

    async def run(self) -> None:
        self.show(self.provider.placeholder())
        self._last_reload_marker = await self._reload_marker()
        while True:
            try:
                refresh_after = await self.render_once()
            except RepositoryError as e:
                logger.error(f"Could not read shared recommendation: {e}")
                refresh_after = self.clock.next_midnight()
            await self._sleep_until(refresh_after)

    async def _sleep_until(self, refresh_after: datetime) -> None:
        while self.clock.now() < refresh_after:
            remaining = (refresh_after - self.clock.now()).total_seconds()
            await asyncio.sleep(max(0.0, min(remaining, self.settings.poll_interval_seconds)))
            marker = await self._reload_marker()
            if marker != self._last_reload_marker:
                self._last_reload_marker = marker
                logger.info("Timeline reload requested by the app")
                return

    async def _reload_marker(self) -> Optional[str]:
        try:
            return await self.shared_defaults.get_string(RELOAD_REQUESTED_KEY)
        except RepositoryError as e:
            logger.warning(f"Could not read reload marker: {e}")
            return self._last_reload_marker


def build_host(settings: Settings, widget_settings: WidgetSettings) -> WidgetHost:
    shared_defaults = SQLAlchemySharedDefaultsRepository(
        get_sessionmaker(get_shared_engine()), settings.APP_GROUP_SUITE
    )
    clock = LocalClock.from_name(settings.TIMEZONE)
    provider = WidgetTimelineProvider(PublishedRecommendationReader(shared_defaults), clock)
    return WidgetHost(provider, shared_defaults, clock, widget_settings)


async def run_widget() -> None:
    await create_shared_tables()
    host = build_host(Settings(), WidgetSettings())
    try:
        await host.run()
    finally:
        await dispose_engine()


def main():
    setup_logging()
    logger.info("starting widget host")
    try:
        asyncio.run(run_widget())
    except KeyboardInterrupt:
        logger.info("widget host stopped")


if __name__ == "__main__":
    main()
