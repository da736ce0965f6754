"""
Configuration settings for the record store.

Uses Pydantic Settings to load environment variables (and an optional `.env`
file) for logging, default file locations, the pipeline threshold and the
collation locale used when sorting by name.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Files
    data_path: str = Field("data.json", alias="DATA_PATH")
    output_dir: str = Field(".", alias="OUTPUT_DIR")

    # Pipeline defaults
    min_value: float = Field(10.0, alias="MIN_VALUE")
    sort_locale: str = Field("", alias="SORT_LOCALE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
