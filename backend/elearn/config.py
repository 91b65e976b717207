"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - platform_owner and default_platform_fee only matter when the platform_config
      row is first created; the persisted row wins afterwards (owner fixed at deployment)
    - platform_owner is a non-empty account; default_platform_fee is within 0..100

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from elearn.core.domain_types import DEFAULT_PLATFORM_FEE, MAX_FEE_PERCENTAGE


class Settings(BaseSettings):
    """Ledger service settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://elearn:elearn@db:5432/elearn"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Ledger deployment
    platform_owner: str = "deployer"
    default_platform_fee: int = Field(DEFAULT_PLATFORM_FEE, ge=0, le=MAX_FEE_PERCENTAGE)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("platform_owner")
    @classmethod
    def owner_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("platform_owner must name an account")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
