from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from calendar_dashboard.constants import DEFAULT_LOCALE, DEFAULT_PROVIDER, DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    api_base_url: str = Field("", alias="API_BASE_URL")
    backend_session_secret: str = Field("", alias="BACKEND_SESSION_SECRET")
    api_timeout_seconds: int = Field(10, alias="API_TIMEOUT_SECONDS")

    user_id: str | None = Field(None, alias="CALENDAR_USER_ID")
    calendar_timezone: str = Field(DEFAULT_TIMEZONE, alias="CALENDAR_TIMEZONE")
    calendar_locale: str = Field(DEFAULT_LOCALE, alias="CALENDAR_LOCALE")
    provider_name: str = Field(DEFAULT_PROVIDER, alias="CALENDAR_PROVIDER_NAME")
    theme: str = Field("light", alias="CALENDAR_THEME")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("calendar_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        name = value.strip()
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown CALENDAR_TIMEZONE %r, using %s", value, DEFAULT_TIMEZONE)
            return DEFAULT_TIMEZONE
        return name

    @property
    def api_enabled(self) -> bool:
        return bool(self.api_base_url.strip() and self.backend_session_secret.strip())

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.calendar_timezone)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
