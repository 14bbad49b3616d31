"""Pydantic configuration model for nestor.

Config is loaded from ~/.nestor/config.json and can be overridden
via NESTOR_ prefixed environment variables (e.g. NESTOR_AUTH_TOKEN).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.main import JsonConfigSettingsSource

DEFAULT_API_BASE = "https://v2.asknestor.me"


class NestorConfig(BaseSettings):
    """Settings for delivering responses to the Nestor messaging API.

    Uses JsonConfigSettingsSource so pydantic-settings reads the JSON file
    and merges it with environment variable overrides.
    """

    model_config = SettingsConfigDict(
        env_prefix="NESTOR_",
        env_nested_delimiter="__",
        json_file=Path("~/.nestor/config.json").expanduser(),
        json_file_encoding="utf-8",
        extra="ignore",
    )

    api_base: str = Field(
        default=DEFAULT_API_BASE,
        description="Base URL of the Nestor API. Messages go to {api_base}/teams/{team_id}/messages.",
    )
    auth_token: SecretStr = Field(
        default=SecretStr(""),
        description="Value sent verbatim in the Authorization header.",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Seconds before an HTTP request to the API is abandoned.",
    )

    @field_validator("api_base")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Enable JSON file loading alongside env vars and init kwargs."""
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls),
        )
