from typing import Annotated

from fastapi import Depends, Request

from daily_movie.applications.use_cases.catalog.load_catalog import LoadCatalogUseCase
from daily_movie.applications.use_cases.deeplink.open_deep_link import OpenDeepLinkUseCase
from daily_movie.applications.use_cases.onboarding.complete_onboarding import CompleteOnboardingUseCase
from daily_movie.applications.use_cases.onboarding.toggle_director import ToggleDirectorUseCase
from daily_movie.applications.use_cases.recommendation.pick_today import EnsureTodayUseCase, PickTodayUseCase
from daily_movie.domain.models.app_state import AppState
from daily_movie.infrastructure.config.container import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


ContainerDep = Annotated[AppContainer, Depends(get_container)]


def get_app_state(container: ContainerDep) -> AppState:
    return container.app_state


def get_load_catalog_use_case(container: ContainerDep) -> LoadCatalogUseCase:
    return container.load_catalog()


def get_toggle_director_use_case(container: ContainerDep) -> ToggleDirectorUseCase:
    return container.toggle_director()


def get_complete_onboarding_use_case(container: ContainerDep) -> CompleteOnboardingUseCase:
    return container.complete_onboarding()


def get_pick_today_use_case(container: ContainerDep) -> PickTodayUseCase:
    return container.pick_today()


def get_ensure_today_use_case(container: ContainerDep) -> EnsureTodayUseCase:
    return container.ensure_today()


def get_open_deep_link_use_case(container: ContainerDep) -> OpenDeepLinkUseCase:
    return container.open_deep_link()
