from __future__ import annotations

from typing import List

from pydantic import Field

from core.settings.base_settings import StoreBaseSettings


class ApiSettings(StoreBaseSettings):
    """
    HTTP layer settings.
    Loaded from .env with exact variable name matching.
    """

    title: str = Field(default="Corner Store API", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        alias="API_CORS_ORIGINS",
    )
    log_level: str = Field(default="INFO", alias="API_LOG_LEVEL")
