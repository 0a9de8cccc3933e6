"""Configuration package."""

from invoice_desk.config.settings import (
    AppSettings,
    AuthSettings,
    Settings,
    StoreSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "AuthSettings",
    "Settings",
    "StoreSettings",
    "get_settings",
    "validate_all_settings",
]
