"""Config – 12-factor settings and validation errors."""

from onesignal_push.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    OneSignalSettings,
    Settings,
    SettingsLoader,
)
from onesignal_push.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OneSignalSettings",
    "Settings",
    "SettingsLoader",
]
