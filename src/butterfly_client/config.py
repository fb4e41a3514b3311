from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client settings loaded from environment variables with BUTTERFLY_ prefix."""

    # API location
    domain: str
    version: str = "v1"
    # Sent as X-Butterfly-Key when set
    public_key: str | None = None
    # Seconds, applied to the httpx client the Client creates for itself
    timeout: float = 10.0

    model_config = SettingsConfigDict(env_prefix="BUTTERFLY_", env_file=".env")


@lru_cache
def get_settings() -> ClientSettings:
    """Return cached client settings instance."""
    return ClientSettings()
