from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Nothing is required from the environment: the defaults bind the demo to
    # 127.0.0.1:8080. A local .env is honoured if present.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Env vars:
    # - APP_HOST (optional)
    # - APP_PORT (optional)
    # - APP_LOG_LEVEL (optional, e.g. DEBUG)
    host: str = Field(default="127.0.0.1", validation_alias="APP_HOST")
    port: int = Field(default=8080, validation_alias="APP_PORT")
    log_level: str = Field(default="INFO", validation_alias="APP_LOG_LEVEL")


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). FastAPI
    dependencies and tests can override/monkeypatch this function.
    """
    return Settings()
