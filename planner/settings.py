from __future__ import annotations

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    gemini_api_key: str | None = Field(None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
    gemini_model: str = Field("gemini-2.5-flash", validation_alias="GEMINI_MODEL")

    timezone: str = Field("Asia/Tokyo", validation_alias="PLANNER_TIMEZONE")
    tasks_file: str | None = Field(None, validation_alias="PLANNER_TASKS_FILE")
    request_timeout: float = Field(30.0, validation_alias="PLANNER_REQUEST_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


# For local dev convenience only.
if os.getenv("PLANNER_DEBUG_SETTINGS"):
    print(get_settings())
