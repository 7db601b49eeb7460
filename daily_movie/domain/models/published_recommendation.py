from pydantic import BaseModel

from daily_movie.domain.models.film import Film

FALLBACK_TITLE = "No Movie"
FALLBACK_YEAR = 0
FALLBACK_LETTERBOXD_URL = "https://letterboxd.com"


class PublishedRecommendation(BaseModel):
    """The single recommendation record shared with the widget surface"""

    title: str = FALLBACK_TITLE
    year: int = FALLBACK_YEAR
    original_director: str = ""
    recommending_director: str = ""
    letterboxd_url: str = FALLBACK_LETTERBOXD_URL

    @classmethod
    def from_film(cls, film: Film) -> "PublishedRecommendation":
        return cls(
            title=film.title,
            year=film.release_year,
            original_director=film.original_director,
            recommending_director=film.recommending_director_name,
            letterboxd_url=film.external_url,
        )
