from datetime import datetime
from typing import List
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ASYNC_DATABASE_URL: str = "sqlite+aiosqlite:///database.db"
    DB_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    PROJECT_NAME: str = "Wild Blog"
    PROJECT_INFO: str = "Posts, categories and comments over REST"
    PROJECT_VERSION: str = "1.0.0"
    TIME_ZONE: str = "UTC"

    DEFAULT_CATEGORY_NAME: str = "Uncategorized"

    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    def get_now(self):
        """Get the current time in the configured time zone."""
        tz = ZoneInfo(self.TIME_ZONE)
        return datetime.now(tz)


settings = Settings()
