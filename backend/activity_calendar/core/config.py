from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application configuration loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    PROJECT_NAME: str = "Daily Activity API"
    API_STR: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    # One sub-directory per participant, image files inside
    PARTICIPANTS_DIR: Path = BASE_DIR / "assets" / "participants"

    # Single origin or "*"; local dev frontend runs on :3000
    FRONTEND_ORIGIN: str = "http://localhost:3000"

    # Base URL the client uses to reach this API
    ACTIVITY_API_URL: str = "http://localhost:5000"

    # Directory listing cache, 0 disables it
    LISTING_CACHE_TTL: int = 0
    REDIS_CACHE_URL: Optional[str] = None

    @field_validator("FRONTEND_ORIGIN", mode="before")
    @classmethod
    def strip_origin(cls, value: str) -> str:
        """Browsers send the origin without a trailing slash."""
        if isinstance(value, str):
            value = value.strip()
            if value != "*":
                value = value.rstrip("/")
        return value

    @field_validator("ACTIVITY_API_URL", mode="before")
    @classmethod
    def strip_api_url(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    @property
    def cors_origins(self) -> list[str]:
        return ["*"] if self.FRONTEND_ORIGIN == "*" else [self.FRONTEND_ORIGIN]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
