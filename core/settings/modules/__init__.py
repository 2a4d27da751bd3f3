# Settings modules
from .api_settings import ApiSettings
from .app_settings import AppSettings, get_app_settings
from .database_settings import DatabaseSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DatabaseSettings",
    "get_app_settings",
]
