"""Config settings – 12-factor env-based configuration."""
from sqs_publisher.config.settings.base import Settings
from sqs_publisher.config.settings.factory import SettingsFactory
from sqs_publisher.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from sqs_publisher.config.settings.publisher import PublisherSettings, parse_byte_size

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PublisherSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "parse_byte_size",
]
