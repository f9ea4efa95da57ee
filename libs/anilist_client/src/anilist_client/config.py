"""
Client configuration for the AniList GraphQL API.

Values are read from ``ANILIST_*`` environment variables or a ``.env`` file.
The endpoint itself is fixed and not configurable.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ANILIST_API_URL = "https://graphql.anilist.co"

MAX_PER_PAGE = 50


class ClientConfig(BaseSettings):
    """AniList client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ANILIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_token: str | None = Field(
        default=None,
        description="Bearer token used by clients constructed without an explicit token",
    )
    timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Total HTTP request timeout in seconds",
    )
    default_per_page: int = Field(
        default=10,
        ge=1,
        le=MAX_PER_PAGE,
        description="Page size used by searches when none is given",
    )


@lru_cache
def get_client_config() -> ClientConfig:
    """Get cached ClientConfig instance populated from environment variables.

    Environment variables are automatically read by Pydantic BaseSettings:
        ANILIST_API_TOKEN (default: unset)
        ANILIST_TIMEOUT_SECONDS (default: 20.0)
        ANILIST_DEFAULT_PER_PAGE (default: 10)

    Returns:
        Cached ClientConfig instance.

    Note:
        Uses @lru_cache for singleton pattern. For testing, call
        get_client_config.cache_clear() to reset the cache.
    """
    return ClientConfig()
