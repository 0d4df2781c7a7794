"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")

    # Measurement type table; the packaged NEWS table is used when unset.
    measurement_types_path: Optional[Path] = Field(
        default=None,
        validation_alias=AliasChoices("MEASUREMENT_TYPES_PATH", "FILE_PATH"),
    )

    cors_allow_origins: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")

    @field_validator("measurement_types_path", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        value = self.cors_allow_origins.strip()
        if not value or value == "*":
            return ["*"]
        items = [item.strip() for item in value.split(",") if item.strip()]
        return items or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
