from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_movie.domain.exceptions import RepositoryError
from daily_movie.domain.ports.repositories.shared_defaults_repository import DefaultsValue, SharedDefaultsRepository
from daily_movie.infrastructure.persistence.models import SharedDefault


class SQLAlchemySharedDefaultsRepository(SharedDefaultsRepository):
    """Key-value suite stored in the app-group database.

    Each `set` commits on its own, so a concurrent reader can observe a mix of
    old and new keys.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], suite: str):
        self.session_factory = session_factory
        self.suite = suite

    async def set(self, key: str, value: DefaultsValue) -> None:
        try:
            async with self.session_factory() as session:
                row = await session.get(SharedDefault, (self.suite, key))
                if row is None:
                    session.add(SharedDefault(suite=self.suite, key=key, value=value))
                else:
                    row.value = value
                await session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not write {key} in {self.suite}: {e}") from e

    async def get_string(self, key: str) -> Optional[str]:
        value = await self._get(key)
        return value if isinstance(value, str) else None

    async def get_int(self, key: str) -> Optional[int]:
        value = await self._get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    async def _get(self, key: str) -> Optional[Any]:
        try:
            async with self.session_factory() as session:
                row = await session.get(SharedDefault, (self.suite, key))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not read {key} from {self.suite}: {e}") from e
        return row.value if row is not None else None
