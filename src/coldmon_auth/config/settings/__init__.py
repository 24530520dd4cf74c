"""Config settings – 12-factor env-based configuration."""
from coldmon_auth.config.settings.base import AuthzSettings, Settings
from coldmon_auth.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    load_settings,
)

__all__ = [
    "AuthzSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
