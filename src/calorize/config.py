"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorize.domain.goals import DEFAULT_AGE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    database_url: str = "sqlite:///calorize.db"
    food_catalog_path: str = "data/foods.json"
    default_age: int = Field(default=DEFAULT_AGE, gt=0)
    session_ttl_seconds: int = Field(default=8 * 3600, gt=0)
    catalog_search_ttl_seconds: int = Field(default=300, gt=0)
    recent_foods_limit: int = Field(default=10, gt=0)
    environment: str = _ENVIRONMENT
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def debug(self) -> bool:
        return self.environment == "local"
