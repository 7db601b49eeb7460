from typing import Annotated

from fastapi import APIRouter, Depends, Query

from daily_movie.applications.interfaces.dtos.message import Message
from daily_movie.applications.use_cases.deeplink.open_deep_link import OpenDeepLinkUseCase
from daily_movie.infrastructure.config.dependencies import get_open_deep_link_use_case

router = APIRouter(prefix="/deeplink", tags=["deeplink"])


@router.get("", response_model=Message)
async def open_deep_link(
    url: Annotated[str, Query(min_length=1)],
    use_case: Annotated[OpenDeepLinkUseCase, Depends(get_open_deep_link_use_case)],
):
    opened = use_case.execute(url)
    return Message(message=f"Opened {opened}" if opened else "Ignored")
