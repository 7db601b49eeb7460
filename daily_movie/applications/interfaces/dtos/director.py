from typing import List

from pydantic import BaseModel

from daily_movie.domain.models.director import Director
from daily_movie.domain.models.film import Film


class FilmPublic(BaseModel):
    title: str
    year: int
    original_director: str
    recommending_director: str
    letterboxd_url: str

    @classmethod
    def from_film(cls, film: Film) -> "FilmPublic":
        return cls(
            title=film.title,
            year=film.release_year,
            original_director=film.original_director,
            recommending_director=film.recommending_director_name,
            letterboxd_url=film.external_url,
        )


class DirectorPublic(BaseModel):
    id: str
    name: str
    recommended_films: List[FilmPublic]
    selected: bool = False

    @classmethod
    def from_director(cls, director: Director, selected: bool = False) -> "DirectorPublic":
        return cls(
            id=director.id,
            name=director.name,
            recommended_films=[FilmPublic.from_film(film) for film in director.recommended_films],
            selected=selected,
        )


class DirectorList(BaseModel):
    directors: List[DirectorPublic]
