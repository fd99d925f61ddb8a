"""Team authentication settings.

The bcrypt work factor lives here so deployments can tune it through
the environment (``TEAMAUTH_BCRYPT_COST``) without code changes.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# bcrypt accepts work factors in the range 4..31
MIN_BCRYPT_COST = 4
MAX_BCRYPT_COST = 31
DEFAULT_BCRYPT_COST = 4


class TeamAuthSettings(BaseSettings):
    """Settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TEAMAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bcrypt_cost: int = Field(
        default=DEFAULT_BCRYPT_COST,
        ge=MIN_BCRYPT_COST,
        le=MAX_BCRYPT_COST,
        description="bcrypt work factor used when protecting basic auth passwords",
    )


@lru_cache
def get_settings() -> TeamAuthSettings:
    """Get cached settings instance."""
    return TeamAuthSettings()


def reset_settings() -> None:
    """Drop the cached settings (used by tests after changing the environment)."""
    get_settings.cache_clear()
