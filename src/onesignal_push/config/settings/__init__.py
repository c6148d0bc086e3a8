"""Config settings – 12-factor env-based configuration."""
from onesignal_push.config.settings.base import Settings
from onesignal_push.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from onesignal_push.config.settings.onesignal import (
    DEFAULT_BASE_URL,
    DEFAULT_NOTIFICATIONS_PATH,
    OneSignalSettings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_NOTIFICATIONS_PATH",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "OneSignalSettings",
    "Settings",
    "SettingsLoader",
]
