"""Config settings – env-based configuration."""
from feature_control.config.settings.base import Settings
from feature_control.config.settings.features import FeatureControlSettings
from feature_control.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeatureControlSettings",
    "Settings",
    "SettingsLoader",
]
