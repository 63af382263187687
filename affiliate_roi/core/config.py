from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Ignore unrelated env keys so a shared .env can hold frontend settings too.
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Affiliate ROI Calculator"
    environment: str = "development"
    api_prefix: str = "/api/v1"
    cors_allow_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    currency_code: str = Field(default="USD", alias="CURRENCY_CODE")
    calculation_version: str = Field(default="v1", alias="CALCULATION_VERSION")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_cors_origins() -> list[str]:
    settings = get_settings()
    return [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
