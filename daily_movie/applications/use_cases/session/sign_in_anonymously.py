import uuid

from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.ports.repositories.shared_defaults_repository import SharedDefaultsRepository
from daily_movie.domain.ports.repositories.user_repository import UserRepository
from daily_movie.domain.ports.services.logger import LoggerPort

USER_ID_KEY = "userID"


class SignInAnonymouslyUseCase:
    """Reuses the locally stored user id, or mints one on first launch."""

    def __init__(
        self,
        app_state: AppState,
        session_defaults: SharedDefaultsRepository,
        user_repository: UserRepository,
        logger: LoggerPort,
    ):
        self.app_state = app_state
        self.session_defaults = session_defaults
        self.user_repository = user_repository
        self.logger = logger

    async def execute(self) -> str:
        user_id = await self.session_defaults.get_string(USER_ID_KEY)
        if user_id:
            self.logger.info(f"Resuming anonymous session for user {user_id}")
        else:
            user_id = uuid.uuid4().hex
            await self.session_defaults.set(USER_ID_KEY, user_id)
            self.logger.info(f"Signed in anonymously as user {user_id}")

        await self.user_repository.ensure_exists(user_id)
        self.app_state.user_id = user_id
        return user_id
