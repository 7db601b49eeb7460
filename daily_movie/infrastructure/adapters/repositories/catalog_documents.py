from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from daily_movie.domain.models.director import Director
from daily_movie.domain.models.film import Film
from daily_movie.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class MovieDocument(BaseModel):
    """Shape of one entry of a director's `recommendedMovies` array"""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    year: StrictInt
    director: StrictStr
    letterboxd_url: StrictStr = Field(alias="letterboxdURL")


class DirectorDocumentData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    recommended_movies: List[Any] = Field(alias="recommendedMovies")


def parse_director(document_id: str, data: Any) -> Optional[Director]:
    """Map a raw director document to the domain model.

    A document without a string name or a movie list is dropped. Inside a kept
    document every malformed movie entry is dropped on its own.
    """
    try:
        director_data = DirectorDocumentData.model_validate(data)
    except ValidationError:
        logger.debug(f"Dropping malformed director document {document_id}")
        return None

    films = []
    for raw_movie in director_data.recommended_movies:
        try:
            movie = MovieDocument.model_validate(raw_movie)
        except ValidationError:
            logger.debug(f"Dropping malformed movie in director document {document_id}")
            continue
        films.append(
            Film(
                title=movie.title,
                release_year=movie.year,
                original_director=movie.director,
                recommending_director_name=director_data.name,
                external_url=movie.letterboxd_url,
            )
        )

    return Director(id=document_id, name=director_data.name, recommended_films=films)
