"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Daylist")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Storage
    storage_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Where the task collection is persisted",
    )
    storage_url: str = Field(
        default="sqlite:///./daylist.db",
        description="SQLAlchemy URL of the database holding the storage slots",
    )
    storage_key: str = Field(
        default="tasks",
        min_length=1,
        description="Slot key under which the whole task collection is stored",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of the console format",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
