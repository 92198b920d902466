"""Loading and access to the application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


def _bundled_locale_files() -> list[Path]:
    return sorted(
        path for path in LOCALES_DIR.iterdir() if path.suffix in {".json", ".toml"}
    )


class Settings(BaseSettings):
    app_name: str = Field(default="Locale Gate", validation_alias="APP_NAME")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    default_locale: str = Field(default="en-US", validation_alias="DEFAULT_LOCALE")
    locale_query_param: str = Field(default="lang", validation_alias="LOCALE_QUERY_PARAM")
    locale_files: list[Path] = Field(
        default_factory=_bundled_locale_files,
        validation_alias="LOCALE_FILES",
    )

    translate_language_context_key: str = Field(
        default="i18n.language",
        validation_alias="TRANSLATE_LANGUAGE_CONTEXT_KEY",
    )
    translate_function_context_key: str = Field(
        default="i18n.translate",
        validation_alias="TRANSLATE_FUNCTION_CONTEXT_KEY",
    )

    locale_cookie_max_age: int = Field(
        default=365 * 24 * 60 * 60,
        validation_alias="LOCALE_COOKIE_MAX_AGE",
    )
    locale_cookie_secure: bool = Field(default=False, validation_alias="LOCALE_COOKIE_SECURE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Cached settings so .env is not re-read on every call."""
    return Settings()
