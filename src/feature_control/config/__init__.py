"""Config – env-based settings for feature resolution."""

from feature_control.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FeatureControlSettings,
    Settings,
    SettingsLoader,
)
from feature_control.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureControlSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
