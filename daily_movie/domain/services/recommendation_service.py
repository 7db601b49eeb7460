import random
from typing import Iterable, List, Optional

from daily_movie.domain.models.director import Director
from daily_movie.domain.models.film import Film
from daily_movie.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class RecommendationService:
    """Domain service drawing one film from the chosen directors' recommendations.

    Both stages are uniform draws: first a director among the chosen ids, then a
    film among that director's recommended films. A draw that lands on a
    director missing from the catalog, or on a director without films, yields
    no result instead of retrying.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def draw(self, chosen_director_ids: Iterable[str], catalog: List[Director]) -> Optional[Film]:
        chosen = sorted(chosen_director_ids)
        if not chosen:
            logger.debug("No directors chosen, nothing to draw")
            return None

        director_id = self._rng.choice(chosen)
        director = next((d for d in catalog if d.id == director_id), None)
        if director is None:
            logger.info(f"Drawn director {director_id} is not in the loaded catalog")
            return None

        if not director.recommended_films:
            logger.info(f"Drawn director {director.name} has no recommended films")
            return None

        return self._rng.choice(director.recommended_films)
