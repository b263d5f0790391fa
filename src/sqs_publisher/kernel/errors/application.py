"""Application-layer errors — setup and usage mistakes."""

from __future__ import annotations

from sqs_publisher.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
