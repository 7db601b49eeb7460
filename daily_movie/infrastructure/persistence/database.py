from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from daily_movie.infrastructure.config.settings import Settings
from daily_movie.infrastructure.persistence.models import shared_registry, table_registry


class _EngineStore:
    engine: Optional[AsyncEngine] = None
    shared_engine: Optional[AsyncEngine] = None


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        settings = Settings()
        _EngineStore.engine = create_async_engine(settings.DATABASE_URL)
    return _EngineStore.engine


def get_shared_engine() -> AsyncEngine:
    """Engine of the app-group area, opened by both the app and the widget host."""
    if _EngineStore.shared_engine is None:
        settings = Settings()
        _EngineStore.shared_engine = create_async_engine(settings.SHARED_DEFAULTS_URL)
    return _EngineStore.shared_engine


def get_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_tables() -> None:
    async with get_engine().begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)
    async with get_shared_engine().begin() as conn:
        await conn.run_sync(shared_registry.metadata.create_all)


async def create_shared_tables() -> None:
    async with get_shared_engine().begin() as conn:
        await conn.run_sync(shared_registry.metadata.create_all)


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
    if _EngineStore.shared_engine is not None:
        await _EngineStore.shared_engine.dispose()
        _EngineStore.shared_engine = None
