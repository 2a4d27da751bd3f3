# Settings package
from core.settings.modules import ApiSettings, AppSettings, DatabaseSettings, get_app_settings

__all__ = ["get_app_settings", "AppSettings", "ApiSettings", "DatabaseSettings"]
