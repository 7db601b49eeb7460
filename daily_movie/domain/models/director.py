from typing import List

from pydantic import BaseModel, ConfigDict, Field

from daily_movie.domain.models.film import Film


class Director(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    recommended_films: List[Film] = Field(default_factory=list)
