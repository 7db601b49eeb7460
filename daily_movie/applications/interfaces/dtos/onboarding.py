from typing import List

from pydantic import BaseModel

from daily_movie.domain.models.app_state import MAX_SELECTED_DIRECTORS, AppState


class SelectionPublic(BaseModel):
    chosen_director_ids: List[str]
    count: int
    max_count: int = MAX_SELECTED_DIRECTORS
    can_complete: bool
    completed: bool

    @classmethod
    def from_state(cls, state: AppState) -> "SelectionPublic":
        return cls(
            chosen_director_ids=sorted(state.chosen_director_ids),
            count=len(state.chosen_director_ids),
            can_complete=state.can_complete_onboarding,
            completed=state.onboarding_completed,
        )
