import random
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.ports.repositories.catalog_repository import CatalogRepository
from daily_movie.domain.ports.repositories.shared_defaults_repository import SharedDefaultsRepository
from daily_movie.domain.ports.repositories.user_repository import UserRepository
from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.notification_scheduler import NotificationScheduler
from daily_movie.domain.ports.services.url_opener import UrlOpener
from daily_movie.domain.ports.services.widget_center import WidgetCenter
from daily_movie.infrastructure.persistence.models import shared_registry, table_registry

from .factories import FixedClock, director_factory


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def mock_catalog_repository():
    """Mock catalog repository for use case testing"""
    return AsyncMock(spec=CatalogRepository)


@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_shared_defaults():
    return AsyncMock(spec=SharedDefaultsRepository)


@pytest.fixture
def mock_widget_center():
    return AsyncMock(spec=WidgetCenter)


@pytest.fixture
def mock_notification_scheduler():
    scheduler = AsyncMock(spec=NotificationScheduler)
    scheduler.request_authorization.return_value = True
    return scheduler


@pytest.fixture
def mock_url_opener():
    opener = Mock(spec=UrlOpener)
    opener.open.return_value = True
    return opener


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def catalog():
    return director_factory.create_catalog(size=8)


@pytest.fixture
def app_state(catalog):
    state = AppState(user_id="user-1")
    state.replace_catalog(catalog)
    return state


@pytest.fixture
def onboarded_state(app_state, catalog):
    """State with five directors chosen and onboarding completed"""
    for director in catalog[:5]:
        app_state.toggle(director.id)
    app_state.mark_onboarding_completed()
    return app_state


class BaseIntegrationTest:
    """Base class for tests running against a throwaway SQLite database"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self, tmp_path):
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)
            await conn.run_sync(shared_registry.metadata.create_all)

        yield engine

        await engine.dispose()

    @pytest.fixture
    def session_factory(self, sqlite_engine):
        return async_sessionmaker(sqlite_engine, expire_on_commit=False)
