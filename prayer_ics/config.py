#!/usr/bin/env python3
"""Configuration settings loaded from environment / .env file."""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AlAdhan upstream
    aladhan_base_url: str = "https://api.aladhan.com/v1"
    user_agent: str = "prayer-ics"
    http_timeout: float = 10.0

    # Fallback location (Paris) when neither query nor geo headers give one
    default_latitude: float = 48.8566
    default_longitude: float = 2.3522
    default_timezone: str = "Europe/Paris"

    # Horizon in days
    default_horizon_days: int = 365
    max_horizon_days: int = 400

    # Geolocation headers set by the edge in front of us
    geo_latitude_header: str = "x-vercel-ip-latitude"
    geo_longitude_header: str = "x-vercel-ip-longitude"

    cache_control: str = "s-maxage=21600, stale-while-revalidate=86400"

    # Language of calendar name, descriptions and reminders: en | fr
    feed_language: str = "en"

    # CORS — comma-separated allowed origins
    api_cors_origins: str = "*"

    log_level: str = "INFO"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


settings = Settings()
