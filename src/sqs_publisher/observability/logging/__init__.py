"""Observability – structured logging helpers."""
from sqs_publisher.observability.logging.factory import JsonLoggerFactory
from sqs_publisher.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from sqs_publisher.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
