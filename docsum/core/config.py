"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from docsum.core.errors import ConfigurationError, MissingCredentialError

CREDENTIAL_ENV_VAR = "GEMINI_API_KEY"


class Settings(BaseSettings):
    """
    Configuration loaded from environment variables.

    Only secrets and deployment-specific values belong here.
    The model identifier and OCR language are fixed in ``docsum.core.constants``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # ---------------------------------------------------------------------------
    # API Keys (required secrets)
    # ---------------------------------------------------------------------------
    gemini_api_key: str = Field(..., validation_alias=CREDENTIAL_ENV_VAR)

    # ---------------------------------------------------------------------------
    # Server (optional)
    # ---------------------------------------------------------------------------
    app_env: str = Field(default="local", validation_alias="APP_ENV")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5000, validation_alias="PORT")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias="CORS_ALLOW_ORIGINS",
    )
    max_upload_bytes: int = Field(default=0, validation_alias="MAX_UPLOAD_BYTES")  # 0 = disabled

    # ---------------------------------------------------------------------------
    # OCR (optional)
    # ---------------------------------------------------------------------------
    tesseract_cmd: str | None = Field(default=None, validation_alias="TESSERACT_CMD")

    @field_validator("gemini_api_key", "app_env", "host", "tesseract_cmd", mode="before")
    @classmethod
    def _strip_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("gemini_api_key")
    @classmethod
    def _require_credential(cls, value: str) -> str:
        if not value:
            raise ValueError(f"{CREDENTIAL_ENV_VAR} must not be blank")
        return value

    @field_validator("tesseract_cmd")
    @classmethod
    def _empty_as_none(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _parse_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
            return [item for item in items if item]
        return value

    @field_validator("max_upload_bytes")
    @classmethod
    def _clamp_upload_bytes(cls, value: int) -> int:
        return max(0, value)


def _is_credential_error(exc: ValidationError) -> bool:
    for error in exc.errors():
        loc = error.get("loc", ())
        if CREDENTIAL_ENV_VAR in loc or "gemini_api_key" in loc:
            return True
    return False


def load_settings(**overrides: object) -> Settings:
    """Build settings, translating validation failures into application errors."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        if _is_credential_error(exc):
            raise MissingCredentialError(f"{CREDENTIAL_ENV_VAR} is not configured.") from exc
        raise ConfigurationError(f"Invalid configuration: {exc.error_count()} error(s).") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
