"""Configuration via pydantic-settings — env vars / .env file."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_output_path() -> Path:
    """Fallback CSV location when none is configured."""
    return Path.home() / "Documents" / "SpeakerLogger" / "chat.csv"


class Settings(BaseSettings):
    """Speakerlog configuration — loaded from env vars / .env file."""

    model_config = SettingsConfigDict(env_prefix="SPEAKERLOG_", env_file=".env")

    target: str = Field(default="", description="Speaker to log: 'Name' or 'Name@World'")
    output_csv_path: Path = Field(default_factory=default_output_path, description="CSV file to append to")
    poll_interval: float = Field(default=0.25, description="Transcript poll interval in seconds")

    @field_validator("target", mode="before")
    @classmethod
    def _strip_target(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("output_csv_path", mode="before")
    @classmethod
    def _blank_path_uses_default(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return default_output_path()
        return value


def load_settings(**overrides: object) -> Settings:
    """Build Settings, letting explicit (non-None) overrides win over the environment."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
