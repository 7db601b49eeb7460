from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_movie.domain.exceptions import CatalogFetchError, RepositoryError
from daily_movie.domain.models.director import Director
from daily_movie.domain.ports.repositories.catalog_repository import CatalogRepository
from daily_movie.infrastructure.adapters.repositories.catalog_documents import parse_director
from daily_movie.infrastructure.persistence.models import DirectorDocument


class SQLAlchemyCatalogRepository(CatalogRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_all_directors(self) -> List[Director]:
        try:
            async with self.session_factory() as session:
                documents = (await session.scalars(select(DirectorDocument).order_by(DirectorDocument.id))).all()
        except SQLAlchemyError as e:
            raise CatalogFetchError(f"Could not read directors collection: {e}") from e

        directors = []
        for document in documents:
            director = parse_director(document.id, document.data)
            if director is not None:
                directors.append(director)
        return directors

    async def upsert_director(self, director_id: str, document: dict) -> None:
        try:
            async with self.session_factory() as session:
                existing = await session.get(DirectorDocument, director_id)
                if existing is None:
                    session.add(DirectorDocument(id=director_id, data=dict(document)))
                else:
                    existing.data = dict(document)
                await session.commit()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not write director {director_id}: {e}") from e
