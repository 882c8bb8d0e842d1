"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARTICLE_RENDERER_", extra="ignore")

    app_name: str = Field(default="Article Renderer API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level configured at startup.",
    )
    max_list_depth: int = Field(
        default=32,
        ge=1,
        description="Nested list levels decoded before deeper entries are replaced by a placeholder.",
    )
    legacy_table_headings: bool = Field(
        default=False,
        description=(
            "Coalesce table 'withHeadings' like the old front end (value || true), so an explicit"
            " false still renders a heading row."
        ),
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
