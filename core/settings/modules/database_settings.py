from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import StoreBaseSettings


class DatabaseSettings(StoreBaseSettings):
    """
    Database connection settings.
    Loaded from .env with exact variable name matching.
    """

    database_url: str = Field(
        default="sqlite+aiosqlite:///./cornerstore.db", alias="DATABASE_URL"
    )
    echo_sql: bool = Field(default=False, alias="DATABASE_ECHO_SQL")
    seed_on_startup: bool = Field(default=True, alias="DATABASE_SEED_ON_STARTUP")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        return self.is_sqlite and ":memory:" in self.database_url
