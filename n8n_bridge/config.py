from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_N8N_BASE_URL = "https://n8n.sonnd.com/api/v1"


class Settings(BaseSettings):
    """Bridge settings loaded from environment variables with validation."""

    model_config = SettingsConfigDict(
        env_file=(str(Path(__file__).resolve().parents[1] / ".env"), ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    app_name: str = Field(default="n8n AI Bridge", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        alias="CORS_ORIGINS",
    )

    n8n_api_key: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("N8N_API", "N8N_API_KEY"),
    )
    n8n_base_url: str = Field(default=DEFAULT_N8N_BASE_URL, alias="N8N_BASE_URL")
    probe_on_startup: bool = Field(default=True, alias="N8N_PROBE_ON_STARTUP")

    @field_validator("n8n_base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Require an http(s) URL and drop trailing slashes."""
        normalized = value.strip().rstrip("/")
        if not normalized.lower().startswith(("http://", "https://")):
            raise ValueError("N8N_BASE_URL must start with http:// or https://")
        return normalized

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: str | list[str]) -> list[str]:
        """Support comma-separated CORS origins from environment variables."""
        if isinstance(value, str):
            if not value.strip():
                return []
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self.n8n_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
