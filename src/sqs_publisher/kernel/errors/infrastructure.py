"""Infrastructure errors — queue resolution and publish failures."""

from __future__ import annotations

from typing import Any

from sqs_publisher.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a local decision."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to reach an external resource."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class EndpointResolutionError(ConnectionError):
    """The queue name could not be resolved to a queue URL.

    Raised once at setup time; the queue name, owner account and credentials
    should be verified.
    """

    default_code = "endpoint_resolution_error"

    def __init__(
        self,
        queue_name: str,
        owner_account_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"Could not resolve queue '{queue_name}'"
        if owner_account_id:
            message = f"{message} owned by account '{owner_account_id}'"
        super().__init__(queue_name, message, **kwargs)
        self.queue_name = queue_name
        self.owner_account_id = owner_account_id


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class PublishError(ExternalServiceError):
    """The queue service rejected a ``send_one`` / ``send_batch`` call."""

    default_code = "publish_error"

    def __init__(
        self,
        message: str | None = None,
        *,
        queue_url: str | None = None,
        error_code: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__("sqs", message, **kwargs)
        self.queue_url = queue_url
        self.error_code = error_code


__all__ = [
    "ConnectionError",
    "EndpointResolutionError",
    "ExternalServiceError",
    "InfrastructureError",
    "PublishError",
]
