from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBaseSettings(BaseSettings):
    """Base for every settings section; reads the process env and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
