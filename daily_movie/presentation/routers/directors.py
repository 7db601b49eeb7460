from typing import Annotated

from fastapi import APIRouter, Depends

from daily_movie.applications.interfaces.dtos.director import DirectorList, DirectorPublic
from daily_movie.applications.interfaces.dtos.message import Message
from daily_movie.applications.use_cases.catalog.load_catalog import LoadCatalogUseCase
from daily_movie.domain.models.app_state import AppState
from daily_movie.infrastructure.config.dependencies import get_app_state, get_load_catalog_use_case

router = APIRouter(prefix="/directors", tags=["directors"])

AppStateDep = Annotated[AppState, Depends(get_app_state)]


@router.get("/", response_model=DirectorList)
async def read_directors(app_state: AppStateDep):
    """Directors of the loaded catalog; empty until the first fetch resolves"""
    chosen = app_state.chosen_director_ids
    return DirectorList(
        directors=[DirectorPublic.from_director(director, director.id in chosen) for director in app_state.catalog]
    )


@router.post("/reload", response_model=Message)
async def reload_directors(use_case: Annotated[LoadCatalogUseCase, Depends(get_load_catalog_use_case)]):
    loaded = await use_case.execute()
    return Message(message="Catalog reloaded" if loaded else "Catalog unchanged")
