"""Application settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "HTML Drop"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: str = "*"  # comma-separated

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/uploads.db"

    # Uploads
    max_upload_size: int = 5 * 1024 * 1024  # 5 MiB
    max_project_name_length: int = 50

    # Slugs
    slug_bytes: int = Field(6, ge=6)
    slug_max_attempts: int = Field(5, ge=1)

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
