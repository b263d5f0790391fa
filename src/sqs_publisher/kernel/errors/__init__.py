"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config.validation)
    │       ├── InvalidConfigurationError
    │       ├── MissingRequiredSettingError
    │       └── InvalidSettingValueError
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        │   └── EndpointResolutionError
        └── ExternalServiceError
            └── PublishError
"""

from sqs_publisher.kernel.errors.application import ApplicationError
from sqs_publisher.kernel.errors.base import BaseError
from sqs_publisher.kernel.errors.infrastructure import (
    ConnectionError,
    EndpointResolutionError,
    ExternalServiceError,
    InfrastructureError,
    PublishError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "EndpointResolutionError",
    "ExternalServiceError",
    "InfrastructureError",
    "PublishError",
]
