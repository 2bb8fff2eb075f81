"""Application settings via Pydantic Settings."""

from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Package Objects API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)

    # Database (PostgreSQL), required
    database_url: str = Field(min_length=1)

    @property
    def async_database_url(self) -> str:
        """Get database URL with asyncpg driver.

        Hosting providers hand out postgres:// or postgresql:// URLs; the async
        engine needs postgresql+asyncpg://.
        """
        url = self.database_url
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return url.replace(prefix, "postgresql+asyncpg://", 1)
        return url

    # Timeouts (seconds)
    health_timeout: float = Field(default=2.0, gt=0)
    query_timeout: float = Field(default=5.0, gt=0)
    startup_ping_timeout: float = Field(default=5.0, gt=0)

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def _strip_database_url(cls, v: object) -> object:
        """Whitespace-only DATABASE_URL counts as missing."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """Comma-separated string ("https://a.com,http://localhost:3000") or a list."""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [str(x).strip() for x in v if str(x).strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
