from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fully qualified custom object names look like 'p' + portal id + '_' + internal name.
_OBJECT_TYPE_RE = re.compile(r"^p\d+_[A-Za-z0-9_]+$")


class AppConfig(BaseSettings):
    """Process-wide settings, read once at startup.

    Values come from the environment and an optional `.env` file. The object is
    frozen so request handlers can share it without copying.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    hubspot_access_token: str | None = Field(
        default=None,
        description="Private app access token sent as a bearer credential.",
    )
    custom_object_type: str = Field(
        default="p50294925_pets",
        description="Fully qualified custom object name: 'p<portal id>_<internal name>'.",
    )
    hubspot_api_base_url: str = Field(default="https://api.hubapi.com", min_length=8)
    hubspot_timeout_seconds: float = Field(default=30.0, gt=0)

    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)

    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)
    log_max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    log_backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")

    @field_validator("custom_object_type")
    @classmethod
    def _check_object_type(cls, value: str) -> str:
        value = value.strip()
        if not _OBJECT_TYPE_RE.match(value):
            raise ValueError("custom_object_type must look like 'p<portal id>_<internal name>'")
        return value

    @field_validator("hubspot_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def portal_id(self) -> str:
        return self.custom_object_type[1:].split("_", 1)[0]

    @property
    def objects_url(self) -> str:
        """Collection endpoint for the configured custom object."""

        return f"{self.hubspot_api_base_url}/crm/v3/objects/{self.custom_object_type}"


def load_app_config(
    environ: Mapping[str, str] | None = None,
    *,
    env_file: str | Path | None = ".env",
) -> AppConfig:
    """Build the config once at startup.

    - Reads the process environment and `env_file` (pass None to skip it).
    - Keys in `environ` override both; names are matched case-insensitively.
    - Validation is performed by Pydantic.
    """

    overrides: dict[str, Any] = {}
    for key, raw in (environ or {}).items():
        name = key.lower()
        if name in AppConfig.model_fields:
            overrides[name] = raw
    return AppConfig(_env_file=env_file, **overrides)
