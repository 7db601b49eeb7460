from daily_movie.domain.exceptions import CatalogFetchError
from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.ports.repositories.catalog_repository import CatalogRepository
from daily_movie.domain.ports.services.logger import LoggerPort


class LoadCatalogUseCase:
    def __init__(self, app_state: AppState, catalog_repository: CatalogRepository, logger: LoggerPort):
        self.app_state = app_state
        self.catalog_repository = catalog_repository
        self.logger = logger

    async def execute(self) -> bool:
        """Replace the catalog wholesale; on failure keep the previous one."""
        try:
            directors = await self.catalog_repository.get_all_directors()
        except CatalogFetchError as e:
            self.logger.error(f"Error loading directors: {e}")
            return False

        self.app_state.replace_catalog(directors)
        self.logger.info(f"Loaded {len(directors)} directors")
        return True
