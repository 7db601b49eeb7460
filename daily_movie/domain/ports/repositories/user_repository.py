from abc import ABC, abstractmethod
from typing import List, Optional


class UserRepository(ABC):
    @abstractmethod
    async def ensure_exists(self, user_id: str) -> None:
        pass

    @abstractmethod
    async def save_selected_directors(self, user_id: str, director_ids: List[str]) -> None:
        """Merge the selected director ids into the user's document."""
        pass

    @abstractmethod
    async def get_selected_directors(self, user_id: str) -> Optional[List[str]]:
        pass
