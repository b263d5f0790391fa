"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from sqs_publisher.config.validation import (
    ConfigError,
    InvalidConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from sqs_publisher.kernel.errors import (
    ApplicationError,
    BaseError,
    ConnectionError,
    EndpointResolutionError,
    ExternalServiceError,
    InfrastructureError,
    PublishError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_cls", "parent"),
        [
            (ApplicationError, BaseError),
            (InfrastructureError, BaseError),
            (ConnectionError, InfrastructureError),
            (EndpointResolutionError, ConnectionError),
            (ExternalServiceError, InfrastructureError),
            (PublishError, ExternalServiceError),
            (ConfigError, ApplicationError),
            (InvalidConfigurationError, ConfigError),
            (MissingRequiredSettingError, ConfigError),
            (InvalidSettingValueError, ConfigError),
        ],
    )
    def test_subclassing(self, error_cls: type, parent: type) -> None:
        assert issubclass(error_cls, parent)


class TestEndpointResolutionError:
    def test_message_names_queue(self) -> None:
        err = EndpointResolutionError("orders")
        assert err.message == "Could not resolve queue 'orders'"
        assert err.resource == "orders"
        assert err.code == "endpoint_resolution_error"

    def test_message_names_owner_account(self) -> None:
        err = EndpointResolutionError("orders", "123456789012")
        assert "123456789012" in err.message
        assert err.owner_account_id == "123456789012"


class TestPublishError:
    def test_defaults(self) -> None:
        err = PublishError()
        assert err.service == "sqs"
        assert err.code == "publish_error"
        assert err.message == "External service 'sqs' error"

    def test_carries_queue_and_error_code(self) -> None:
        err = PublishError("boom", queue_url="https://q", error_code="AccessDenied", status_code=403)
        assert err.queue_url == "https://q"
        assert err.error_code == "AccessDenied"
        assert err.status_code == 403
