from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.clockify.me/api/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="", extra="ignore")

    # Clockify
    CLOCKIFY_API_KEY: str | None = None  # do not commit
    CLOCKIFY_BASE_URL: str = DEFAULT_BASE_URL
    CLOCKIFY_TIMEOUT: float = 20.0

    # Observability
    LOG_JSON: bool = False
