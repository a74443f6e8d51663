"""Config – 12-factor settings and loaders."""

from typebus.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from typebus.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
