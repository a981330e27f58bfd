import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (locale preferences)
    database_url_sync: str = "sqlite:///./yogaswiss.db"

    # Catalogs
    catalog_base_url: str = ""
    catalog_fetch_timeout: float = 5.0

    # Locale persistence / routing
    locale_preference_key: str = "yogaswiss-locale"
    path_routing: bool = True
    site_origin: str = "http://localhost:3000"

    # App
    app_name: str = "YogaSwiss"
    debug: bool = False


settings = Settings()

_log = logging.getLogger(__name__)
if settings.catalog_fetch_timeout <= 0:
    _log.warning(
        "CATALOG_FETCH_TIMEOUT=%s disables the catalog fetch timeout",
        settings.catalog_fetch_timeout,
    )
