from datetime import date
from typing import Callable, Dict, FrozenSet, List, Optional

from daily_movie.domain.models.director import Director
from daily_movie.domain.models.film import Film

MAX_SELECTED_DIRECTORS = 5

StateListener = Callable[["AppState"], None]


class AppState:
    """Selection state of one app session.

    The main process owns exactly one instance and is its only writer. Readers
    either take the read-only properties or subscribe to change notifications.
    """

    def __init__(self, user_id: str = ""):
        self.user_id = user_id
        self._catalog: List[Director] = []
        self._chosen_director_ids: set[str] = set()
        self._onboarding_completed = False
        self._todays_film: Optional[Film] = None
        self._todays_film_date: Optional[date] = None
        self._listeners: Dict[int, StateListener] = {}
        self._next_token = 0

    @property
    def catalog(self) -> List[Director]:
        return list(self._catalog)

    @property
    def chosen_director_ids(self) -> FrozenSet[str]:
        return frozenset(self._chosen_director_ids)

    @property
    def onboarding_completed(self) -> bool:
        return self._onboarding_completed

    @property
    def todays_film(self) -> Optional[Film]:
        return self._todays_film

    @property
    def todays_film_date(self) -> Optional[date]:
        return self._todays_film_date

    @property
    def can_complete_onboarding(self) -> bool:
        return not self._onboarding_completed and len(self._chosen_director_ids) == MAX_SELECTED_DIRECTORS

    def find_director(self, director_id: str) -> Optional[Director]:
        return next((director for director in self._catalog if director.id == director_id), None)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener, returns a callable that removes it."""
        token = self._next_token
        self._next_token += 1
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def replace_catalog(self, directors: List[Director]) -> None:
        self._catalog = list(directors)
        self._notify()

    def toggle(self, director_id: str) -> bool:
        """Add or remove a director from the selection.

        Returns True when the selection changed. Additions are capped at five and
        limited to ids of the loaded catalog; the selection is frozen once
        onboarding has completed.
        """
        if self._onboarding_completed:
            return False
        if director_id in self._chosen_director_ids:
            self._chosen_director_ids.remove(director_id)
        elif len(self._chosen_director_ids) >= MAX_SELECTED_DIRECTORS:
            return False
        elif self.find_director(director_id) is None:
            return False
        else:
            self._chosen_director_ids.add(director_id)
        self._notify()
        return True

    def mark_onboarding_completed(self) -> bool:
        if not self.can_complete_onboarding:
            return False
        self._onboarding_completed = True
        self._notify()
        return True

    def set_todays_film(self, film: Film, on_date: date) -> None:
        self._todays_film = film
        self._todays_film_date = on_date
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners.values()):
            listener(self)
