from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite+aiosqlite:///./daily_movie.db"
    SHARED_DEFAULTS_URL: str = "sqlite+aiosqlite:///./app_group.db"
    APP_GROUP_SUITE: str = "group.com.yourapp.moviewidget"
    SESSION_SUITE: str = "daily_movie.session"
    TIMEZONE: Optional[str] = None


class NotificationSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="NOTIFY_", extra="ignore")

    bot_token: Optional[str] = None
    chat_id: Optional[int] = None
    identifier: str = "DailyMovieRec"
    hour: int = 0
    minute: int = 0


class WidgetSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="WIDGET_", extra="ignore")

    kind: str = "MovieRecommendationWidget"
    poll_interval_seconds: float = 60.0
    is_preview: bool = False
