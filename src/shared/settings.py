"""Environment-driven settings for push delivery and message rendering.

Values come from real environment variables or a local ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EXPO_PUSH_API = "https://exp.host/--/api/v2/push/send"


class Settings(BaseSettings):
    """Global settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Push gateway
    PUSH_GATEWAY_URL: str = EXPO_PUSH_API
    PUSH_ACCESS_TOKEN: str | None = None
    PUSH_TIMEOUT_SECONDS: float = 10.0

    # The gateway rejects requests carrying more than 100 messages
    PUSH_BATCH_SIZE: int = Field(default=100, ge=1, le=100)

    # Per-message defaults
    PUSH_TTL_SECONDS: int = 24 * 60 * 60
    PUSH_SOUND: str = "default"
    PUSH_PRIORITY: str = "high"
    PUSH_BADGE: int = 1

    # Templates
    CURRENCY_SYMBOL: str = "₦"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
