from abc import ABC, abstractmethod
from typing import List

from daily_movie.domain.models.director import Director


class CatalogRepository(ABC):
    @abstractmethod
    async def get_all_directors(self) -> List[Director]:
        """Fetch every director document, dropping malformed records.

        Raises CatalogFetchError when the store cannot be read.
        """
        pass

    @abstractmethod
    async def upsert_director(self, director_id: str, document: dict) -> None:
        pass
