from datetime import datetime
from typing import List

from pydantic import BaseModel

from daily_movie.domain.models.published_recommendation import PublishedRecommendation


class WidgetEntry(BaseModel):
    """One timeline entry rendered by the widget host"""

    date: datetime
    title: str
    year: int
    original_director: str
    recommending_director: str
    letterboxd_url: str

    @classmethod
    def from_record(cls, record: PublishedRecommendation, at: datetime) -> "WidgetEntry":
        return cls(
            date=at,
            title=record.title,
            year=record.year,
            original_director=record.original_director,
            recommending_director=record.recommending_director,
            letterboxd_url=record.letterboxd_url,
        )


class WidgetTimeline(BaseModel):
    entries: List[WidgetEntry]
    refresh_after: datetime
