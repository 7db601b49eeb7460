import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine
from telegram.error import TelegramError
from telegram.ext import Application

from daily_movie.applications.services.detached_tasks import DetachedTaskRunner
from daily_movie.applications.services.local_clock import LocalClock
from daily_movie.applications.services.recommendation_publisher import RecommendationPublisher
from daily_movie.applications.use_cases.catalog.load_catalog import LoadCatalogUseCase
from daily_movie.applications.use_cases.deeplink.open_deep_link import OpenDeepLinkUseCase
from daily_movie.applications.use_cases.notification.schedule_daily_notification import (
    ScheduleDailyNotificationUseCase,
)
from daily_movie.applications.use_cases.onboarding.complete_onboarding import CompleteOnboardingUseCase
from daily_movie.applications.use_cases.onboarding.toggle_director import ToggleDirectorUseCase
from daily_movie.applications.use_cases.recommendation.pick_today import EnsureTodayUseCase, PickTodayUseCase
from daily_movie.applications.use_cases.session.sign_in_anonymously import SignInAnonymouslyUseCase
from daily_movie.domain.models.app_state import AppState
from daily_movie.domain.ports.repositories.catalog_repository import CatalogRepository
from daily_movie.domain.ports.repositories.shared_defaults_repository import SharedDefaultsRepository
from daily_movie.domain.ports.repositories.user_repository import UserRepository
from daily_movie.domain.ports.services.logger import LoggerPort
from daily_movie.domain.ports.services.notification_scheduler import NotificationScheduler
from daily_movie.domain.ports.services.url_opener import UrlOpener
from daily_movie.domain.ports.services.widget_center import WidgetCenter
from daily_movie.domain.services.recommendation_service import RecommendationService
from daily_movie.infrastructure.adapters.repositories.sqlalchemy_catalog_repository import (
    SQLAlchemyCatalogRepository,
)
from daily_movie.infrastructure.adapters.repositories.sqlalchemy_shared_defaults_repository import (
    SQLAlchemySharedDefaultsRepository,
)
from daily_movie.infrastructure.adapters.repositories.sqlalchemy_user_repository import SQLAlchemyUserRepository
from daily_movie.infrastructure.adapters.services.disabled_notification_scheduler import (
    DisabledNotificationScheduler,
)
from daily_movie.infrastructure.adapters.services.shared_defaults_widget_center import SharedDefaultsWidgetCenter
from daily_movie.infrastructure.adapters.services.telegram_notification_scheduler import (
    TelegramNotificationScheduler,
)
from daily_movie.infrastructure.adapters.services.webbrowser_url_opener import WebbrowserUrlOpener
from daily_movie.infrastructure.config.settings import NotificationSettings, Settings
from daily_movie.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from daily_movie.infrastructure.persistence.database import get_sessionmaker


class AppContainer:
    """Owns the session's AppState and wires every use case around it"""

    def __init__(
        self,
        *,
        settings: Settings,
        notification_settings: NotificationSettings,
        app_state: AppState,
        catalog_repository: CatalogRepository,
        user_repository: UserRepository,
        shared_defaults: SharedDefaultsRepository,
        session_defaults: SharedDefaultsRepository,
        widget_center: WidgetCenter,
        notification_scheduler: NotificationScheduler,
        url_opener: UrlOpener,
        clock: LocalClock,
        logger: LoggerPort,
        rng: Optional[random.Random] = None,
        telegram_application: Optional[Application] = None,
    ):
        self.settings = settings
        self.notification_settings = notification_settings
        self.app_state = app_state
        self.catalog_repository = catalog_repository
        self.user_repository = user_repository
        self.shared_defaults = shared_defaults
        self.session_defaults = session_defaults
        self.widget_center = widget_center
        self.notification_scheduler = notification_scheduler
        self.url_opener = url_opener
        self.clock = clock
        self.logger = logger
        self.telegram_application = telegram_application

        self.detached_tasks = DetachedTaskRunner(logger.child("tasks"))
        self.recommendation_service = RecommendationService(rng)
        self.publisher = RecommendationPublisher(shared_defaults, widget_center, logger.child("widget"))

    @classmethod
    def build(
        cls,
        settings: Settings,
        notification_settings: NotificationSettings,
        engine: AsyncEngine,
        shared_engine: AsyncEngine,
    ) -> "AppContainer":
        logger = StdLoggerAdapter()
        session_factory = get_sessionmaker(engine)
        shared_session_factory = get_sessionmaker(shared_engine)
        shared_defaults = SQLAlchemySharedDefaultsRepository(shared_session_factory, settings.APP_GROUP_SUITE)
        scheduler, telegram_application = build_notification_scheduler(
            notification_settings, logger.child("notifications")
        )

        return cls(
            settings=settings,
            notification_settings=notification_settings,
            app_state=AppState(),
            catalog_repository=SQLAlchemyCatalogRepository(session_factory),
            user_repository=SQLAlchemyUserRepository(session_factory),
            shared_defaults=shared_defaults,
            session_defaults=SQLAlchemySharedDefaultsRepository(shared_session_factory, settings.SESSION_SUITE),
            widget_center=SharedDefaultsWidgetCenter(shared_defaults),
            notification_scheduler=scheduler,
            url_opener=WebbrowserUrlOpener(),
            clock=LocalClock.from_name(settings.TIMEZONE),
            logger=logger,
            telegram_application=telegram_application,
        )

    def sign_in_anonymously(self) -> SignInAnonymouslyUseCase:
        return SignInAnonymouslyUseCase(
            self.app_state, self.session_defaults, self.user_repository, self.logger.child("session")
        )

    def load_catalog(self) -> LoadCatalogUseCase:
        return LoadCatalogUseCase(self.app_state, self.catalog_repository, self.logger.child("catalog"))

    def toggle_director(self) -> ToggleDirectorUseCase:
        return ToggleDirectorUseCase(self.app_state, self.logger.child("onboarding"))

    def pick_today(self) -> PickTodayUseCase:
        return PickTodayUseCase(
            self.app_state,
            self.recommendation_service,
            self.publisher,
            self.clock,
            self.logger.child("recommendation"),
        )

    def ensure_today(self) -> EnsureTodayUseCase:
        return EnsureTodayUseCase(self.app_state, self.pick_today(), self.clock)

    def schedule_daily_notification(self) -> ScheduleDailyNotificationUseCase:
        return ScheduleDailyNotificationUseCase(
            self.notification_scheduler,
            self.ensure_today(),
            self.clock,
            self.logger.child("notifications"),
            identifier=self.notification_settings.identifier,
            hour=self.notification_settings.hour,
            minute=self.notification_settings.minute,
        )

    def complete_onboarding(self) -> CompleteOnboardingUseCase:
        return CompleteOnboardingUseCase(
            self.app_state,
            self.user_repository,
            self.pick_today(),
            self.schedule_daily_notification(),
            self.detached_tasks,
            self.logger.child("onboarding"),
        )

    def open_deep_link(self) -> OpenDeepLinkUseCase:
        return OpenDeepLinkUseCase(self.url_opener, self.logger.child("deeplink"))

    async def bootstrap(self) -> None:
        """Anonymous sign-in followed by the first catalog fetch."""
        await self.sign_in_anonymously().execute()
        await self.load_catalog().execute()

    async def start(self) -> None:
        if self.telegram_application is not None:
            try:
                await self.telegram_application.initialize()
                await self.telegram_application.start()
            except TelegramError as e:
                self.logger.error(f"Telegram bot unavailable, daily notifications are disabled: {e}")
                self.telegram_application = None
                self.notification_scheduler = DisabledNotificationScheduler(self.logger.child("notifications"))
        self.detached_tasks.spawn(self.bootstrap(), "bootstrap session")

    async def stop(self) -> None:
        await self.detached_tasks.wait_all()
        if self.telegram_application is not None:
            await self.telegram_application.stop()
            await self.telegram_application.shutdown()


def build_notification_scheduler(
    notification_settings: NotificationSettings, logger: LoggerPort
) -> tuple[NotificationScheduler, Optional[Application]]:
    if not notification_settings.bot_token or notification_settings.chat_id is None:
        logger.info("No Telegram bot configured, daily notifications are disabled")
        return DisabledNotificationScheduler(logger), None

    application = Application.builder().token(notification_settings.bot_token).build()
    return TelegramNotificationScheduler(application, notification_settings.chat_id, logger), application
