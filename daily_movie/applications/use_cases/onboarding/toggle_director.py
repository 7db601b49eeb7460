from daily_movie.applications.interfaces.dtos.onboarding import SelectionPublic
from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.ports.services.logger import LoggerPort


class ToggleDirectorUseCase:
    def __init__(self, app_state: AppState, logger: LoggerPort):
        self.app_state = app_state
        self.logger = logger

    def execute(self, director_id: str) -> SelectionPublic:
        changed = self.app_state.toggle(director_id)
        if not changed:
            self.logger.debug(f"Toggle of director {director_id} left the selection unchanged")
        return SelectionPublic.from_state(self.app_state)
