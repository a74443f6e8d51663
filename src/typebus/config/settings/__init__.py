"""Config settings – 12-factor env-based configuration."""
from typebus.config.settings.base import Settings
from typebus.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
