from __future__ import annotations

from datetime import timedelta, timezone, tzinfo
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    name: str = "eventdesk"
    version: str = "0.1.0"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    # naive event timestamps are read as local time at this offset (UTC+07:00)
    event_utc_offset_minutes: int = 420

    model_config = SettingsConfigDict(
        env_prefix="APP_",  # APP_NAME, APP_EVENT_UTC_OFFSET_MINUTES, ...
        env_file=".env",
        extra="ignore",
    )

    @property
    def event_tz(self) -> tzinfo:
        return timezone(timedelta(minutes=self.event_utc_offset_minutes))


@lru_cache
def get_app_settings(**kwargs) -> AppSettings:
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return AppSettings(**filtered)
