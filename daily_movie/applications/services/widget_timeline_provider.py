from daily_movie.applications.services.local_clock import LocalClock
from daily_movie.applications.services.recommendation_publisher import PublishedRecommendationReader
from daily_movie.domain.models.published_recommendation import FALLBACK_LETTERBOXD_URL, PublishedRecommendation
from daily_movie.domain.models.widget_entry import WidgetEntry, WidgetTimeline

PLACEHOLDER_RECORD = PublishedRecommendation(
    title="Loading...",
    year=0,
    original_director="",
    recommending_director="",
    letterboxd_url=FALLBACK_LETTERBOXD_URL,
)

PREVIEW_RECORD = PublishedRecommendation(
    title="Seven Samurai",
    year=1954,
    original_director="Akira Kurosawa",
    recommending_director="Quentin Tarantino",
    letterboxd_url="https://letterboxd.com/film/seven-samurai/",
)


class WidgetTimelineProvider:
    """Entry points the widget host calls; every path pulls from the shared suite."""

    def __init__(self, reader: PublishedRecommendationReader, clock: LocalClock):
        self.reader = reader
        self.clock = clock

    def placeholder(self) -> WidgetEntry:
        return WidgetEntry.from_record(PLACEHOLDER_RECORD, self.clock.now())

    async def snapshot(self, is_preview: bool) -> WidgetEntry:
        if is_preview:
            return WidgetEntry.from_record(PREVIEW_RECORD, self.clock.now())
        return await self._load_entry()

    async def timeline(self) -> WidgetTimeline:
        entry = await self._load_entry()
        return WidgetTimeline(entries=[entry], refresh_after=self.clock.next_midnight(entry.date))

    async def _load_entry(self) -> WidgetEntry:
        record = await self.reader.read()
        return WidgetEntry.from_record(record, self.clock.now())
