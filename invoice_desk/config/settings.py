"""
Configuration Management for Invoice Desk

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The data-service layer has no external services, so configuration is limited
to the local store (backend, TTL window, simulated latency) and the demo
credential pair used by the auth stub.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Local key/value store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INVOICE_DESK_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend: Literal["memory", "file"] = Field(
        default="memory",
        description="Storage substrate: 'memory' (process-local) or 'file' (JSON file profile)"
    )
    file_path: str = Field(
        default=".invoice_desk/store.json",
        description="Path of the JSON file used by the 'file' backend"
    )
    ttl_minutes: int = Field(
        default=10,
        ge=1,
        description="Inactivity window after which clients/invoices are wiped"
    )
    latency_ms: int = Field(
        default=500,
        ge=0,
        le=10000,
        description="Simulated latency applied to every service call"
    )

    @field_validator('file_path')
    @classmethod
    def validate_file_path(cls, v: str) -> str:
        """Reject paths that point at an existing directory."""
        if Path(v).is_dir():
            raise ValueError(f"Store file path is a directory: {v}")
        return v

    @property
    def ttl_ms(self) -> int:
        """TTL window in milliseconds."""
        return self.ttl_minutes * 60 * 1000

    @property
    def latency_seconds(self) -> float:
        """Simulated latency in seconds (for asyncio.sleep)."""
        return self.latency_ms / 1000


class AuthSettings(BaseSettings):
    """Demo auth stub configuration."""

    model_config = SettingsConfigDict(
        env_prefix="INVOICE_DESK_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    demo_email: str = Field(
        default="demo@example.com",
        description="The only email accepted by login"
    )
    demo_password: str = Field(
        default="password",
        description="The only password accepted by login"
    )
    session_token: str = Field(
        default="mock-session-token",
        description="Token returned by login/register"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def store(self) -> StoreSettings:
        return StoreSettings()

    @property
    def auth(self) -> AuthSettings:
        return AuthSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry for each failing group.
    """
    results = {}

    settings = get_settings()

    for name in ("store", "auth", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
