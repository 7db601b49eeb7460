from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException

from daily_movie.applications.interfaces.dtos.director import FilmPublic
from daily_movie.applications.interfaces.dtos.recommendation import (
    FETCHING_STATUS,
    READY_STATUS,
    TodayRecommendationResponse,
)
from daily_movie.applications.use_cases.recommendation.pick_today import EnsureTodayUseCase, PickTodayUseCase
from daily_movie.domain.models.film import Film
from daily_movie.domain.services.deep_link import build_deep_link
from daily_movie.infrastructure.config.dependencies import get_ensure_today_use_case, get_pick_today_use_case
from daily_movie.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def _to_response(film: Optional[Film]) -> TodayRecommendationResponse:
    if film is None:
        return TodayRecommendationResponse(status=FETCHING_STATUS)
    return TodayRecommendationResponse(
        status=READY_STATUS,
        film=FilmPublic.from_film(film),
        deep_link=build_deep_link(film.external_url),
    )


@router.get("/today", response_model=TodayRecommendationResponse)
async def get_today_recommendation(
    use_case: Annotated[EnsureTodayUseCase, Depends(get_ensure_today_use_case)],
):
    """Today's film, drawn on first request of the day"""
    try:
        return _to_response(await use_case.execute())
    except Exception:
        logger.exception("Unhandled error getting today's recommendation")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/today/reroll", response_model=TodayRecommendationResponse)
async def reroll_today_recommendation(
    use_case: Annotated[PickTodayUseCase, Depends(get_pick_today_use_case)],
):
    try:
        return _to_response(await use_case.execute())
    except Exception:
        logger.exception("Unhandled error drawing a new recommendation")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/health")
async def recommendation_health_check():
    """Health check endpoint for recommendation service"""
    return {"status": "healthy", "service": "daily-movie", "message": "Recommendation service is operational"}
