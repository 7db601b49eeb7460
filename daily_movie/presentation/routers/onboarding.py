from typing import Annotated

from fastapi import APIRouter, Depends

from daily_movie.applications.interfaces.dtos.onboarding import SelectionPublic
from daily_movie.applications.use_cases.onboarding.complete_onboarding import CompleteOnboardingUseCase
from daily_movie.applications.use_cases.onboarding.toggle_director import ToggleDirectorUseCase
from daily_movie.domain.models.app_state import AppState
from daily_movie.infrastructure.config.dependencies import (
    get_app_state,
    get_complete_onboarding_use_case,
    get_toggle_director_use_case,
)

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.get("/", response_model=SelectionPublic)
async def read_selection(app_state: Annotated[AppState, Depends(get_app_state)]):
    return SelectionPublic.from_state(app_state)


@router.post("/toggle/{director_id}", response_model=SelectionPublic)
async def toggle_director(
    director_id: str, use_case: Annotated[ToggleDirectorUseCase, Depends(get_toggle_director_use_case)]
):
    return use_case.execute(director_id)


@router.post("/complete", response_model=SelectionPublic)
async def complete_onboarding(
    use_case: Annotated[CompleteOnboardingUseCase, Depends(get_complete_onboarding_use_case)],
    app_state: Annotated[AppState, Depends(get_app_state)],
):
    """Completes onboarding when exactly five directors are chosen; otherwise a no-op"""
    await use_case.execute()
    return SelectionPublic.from_state(app_state)
