"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded beyond local defaults)
    - get_settings() is cached (lru_cache) — single instance per process
    - database_dsn always names the asyncpg driver for PostgreSQL URLs

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - POSTGRES_* parts kept alongside DATABASE_URL: matches existing docker-compose environments,
      DATABASE_URL wins when both are present
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_asyncpg(url: str) -> str:
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)

    # Database
    database_url: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_name: str = "changelogger_db"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            v = v.strip()
            return _to_asyncpg(v) if v else None
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5
    database_connect_timeout_seconds: float = 5.0

    # Service
    operation_timeout_seconds: PositiveFloat | None = 30.0

    # API
    cors_allow_origin: str = "*"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @property
    def database_dsn(self) -> str:
        """DATABASE_URL when set, otherwise built from the POSTGRES_* parts."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_name}"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
