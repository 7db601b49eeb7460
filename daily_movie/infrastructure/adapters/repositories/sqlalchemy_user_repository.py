from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_movie.domain.exceptions import RepositoryError
from daily_movie.domain.ports.repositories.user_repository import UserRepository
from daily_movie.infrastructure.persistence.models import UserDocument

SELECTED_DIRECTORS_FIELD = "selectedDirectors"


class SQLAlchemyUserRepository(UserRepository):
    """Per-user documents of the `users` collection"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def ensure_exists(self, user_id: str) -> None:
        try:
            async with self.session_factory() as session:
                if await session.get(UserDocument, user_id) is None:
                    session.add(UserDocument(id=user_id, data={}))
                    await session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not create user {user_id}: {e}") from e

    async def save_selected_directors(self, user_id: str, director_ids: List[str]) -> None:
        await self._merge(user_id, {SELECTED_DIRECTORS_FIELD: list(director_ids)})

    async def get_selected_directors(self, user_id: str) -> Optional[List[str]]:
        try:
            async with self.session_factory() as session:
                user = await session.get(UserDocument, user_id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not read user {user_id}: {e}") from e

        if user is None:
            return None
        selected = user.data.get(SELECTED_DIRECTORS_FIELD)
        if not isinstance(selected, list):
            return None
        return [director_id for director_id in selected if isinstance(director_id, str)]

    async def _merge(self, user_id: str, fields: dict) -> None:
        try:
            async with self.session_factory() as session:
                user = await session.get(UserDocument, user_id)
                if user is None:
                    session.add(UserDocument(id=user_id, data=dict(fields)))
                else:
                    # reassign so the JSON column is flagged dirty
                    user.data = {**user.data, **fields}
                await session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not update user {user_id}: {e}") from e
