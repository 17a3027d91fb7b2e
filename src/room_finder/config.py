"""Configuration objects for the room finder."""

from __future__ import annotations

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .duration import SECONDS_PER_PIXEL

DEFAULT_TIMELINE_URL = "https://industryrinostation.roomzilla.net/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Runtime configuration pulled from environment variables."""

    timeline_url: HttpUrl = Field(
        default=DEFAULT_TIMELINE_URL,
        description="Public Roomzilla timeline page listing today's reservations.",
    )
    seconds_per_pixel: float = Field(
        default=SECONDS_PER_PIXEL,
        gt=0,
        description="Booked seconds represented by one pixel of reservation width.",
    )
    timeout_seconds: float = Field(default=15.0, gt=0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    default_window_minutes: int = Field(
        default=60,
        gt=0,
        description="Length of the query window when no end time is given.",
    )
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="ROOM_FINDER_",
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        """Accept level names in any case."""
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level
