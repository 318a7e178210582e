"""Runtime configuration helpers.

Classes:
    Settings: Pydantic settings model capturing environment-driven defaults.

Functions:
    get_settings(): Return a cached Settings instance for dependency injection.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Run Store Leaderboard API"
    database_url: str = "sqlite+aiosqlite:///./leaderboard.db"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


@lru_cache()
def get_settings() -> Settings:
    return Settings()
