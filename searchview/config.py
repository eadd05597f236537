"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseModel):
    serpapi_api_key: SecretStr | None = None
    serpapi_engine: str = Field(default="google", min_length=1)
    base_url: AnyHttpUrl = Field(
        default="https://serpapi.com/search",
        description="SerpApi-compatible search endpoint.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)

    @field_validator("serpapi_api_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    result_limit: int = Field(default=10, ge=1, le=100)
    title_suffix: str = "Search"
    dispatch_timeout_seconds: float | None = Field(
        default=15.0,
        gt=0,
        description="Upper bound on a single provider call; exceeding it triggers the fallback.",
    )

    provider: ProviderSettings = Field(default_factory=ProviderSettings)


@lru_cache
def get_settings() -> SearchSettings:
    """Return cached settings instance."""

    return SearchSettings()


__all__ = [
    "ProviderSettings",
    "SearchSettings",
    "get_settings",
]
