"""Config validation errors."""
from sqs_publisher.config.validation.errors import (
    ConfigError,
    InvalidConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "InvalidConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
