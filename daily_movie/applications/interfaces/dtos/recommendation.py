from typing import Optional

from pydantic import BaseModel

from daily_movie.applications.interfaces.dtos.director import FilmPublic

FETCHING_STATUS = "fetching"
READY_STATUS = "ready"


class TodayRecommendationResponse(BaseModel):
    """Response schema for today's recommendation"""

    status: str
    film: Optional[FilmPublic] = None
    deep_link: Optional[str] = None
