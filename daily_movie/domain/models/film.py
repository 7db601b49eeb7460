import uuid

from pydantic import BaseModel, ConfigDict, Field


class Film(BaseModel):
    """A film recommended by one of the catalog directors"""

    model_config = ConfigDict(frozen=True)

    title: str
    release_year: int
    original_director: str
    recommending_director_name: str
    external_url: str
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
