# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from timebalance.models import TimeFormat


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TIMEBALANCE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Time Balance Engine"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Holidays
    holiday_country: str = Field(default="DE", min_length=2, max_length=2)
    holiday_region: str | None = None  # e.g. "BY" for Bavaria

    # Display
    default_time_format: TimeFormat = TimeFormat.HOURS_MINUTES

    # Vacation carried into a year expires after this day
    carryover_deadline_month: int = Field(default=3, ge=1, le=12)
    carryover_deadline_day: int = Field(default=31, ge=1, le=31)

    # CORS settings
    cors_origins: str = "http://localhost:5173"  # Comma-separated list

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()


settings = get_settings()
