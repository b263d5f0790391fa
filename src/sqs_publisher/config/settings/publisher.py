"""Config settings – PublisherSettings for the SQS publisher."""
from __future__ import annotations

import dataclasses
import re
from typing import Any, ClassVar

from sqs_publisher.application.batching.config import (
    DEFAULT_GROUP_KEY,
    MAX_BATCH_COUNT,
    MAX_MESSAGE_BYTES,
    PublisherConfig,
    is_ordered_queue,
)
from sqs_publisher.config.settings.base import Settings
from sqs_publisher.config.validation import InvalidConfigurationError, InvalidSettingValueError

_BYTE_SIZE = re.compile(r"^\s*(\d+)\s*([a-zA-Z]*)\s*$")
_UNITS: dict[str, int] = {
    "": 1,
    "b": 1,
    "kb": 1000,
    "kib": 1024,
    "mb": 1000**2,
    "mib": 1024**2,
}


def parse_byte_size(value: int | str, setting_name: str = "message_max_size") -> int:
    """Parse ``262144``, ``"262144"`` or ``"256KiB"`` into a byte count."""
    if isinstance(value, bool):
        raise InvalidSettingValueError(setting_name, value, "expected a byte size")
    if isinstance(value, int):
        return value
    match = _BYTE_SIZE.match(value)
    if match is None:
        raise InvalidSettingValueError(setting_name, value, "expected a byte size such as '256KiB'")
    amount, unit = match.groups()
    multiplier = _UNITS.get(unit.lower())
    if multiplier is None:
        raise InvalidSettingValueError(setting_name, value, f"unknown unit {unit!r}")
    return int(amount) * multiplier


@dataclasses.dataclass
class PublisherSettings(Settings):
    """Settings for publishing to one SQS queue.

    Read from ``SQS_PUBLISHER_*`` environment variables by
    :class:`~sqs_publisher.config.settings.EnvSettingsLoader`.  ``queue`` is
    the queue *name*, not its URL; a ``.fifo`` suffix selects ordered mode.
    """

    _prefix: ClassVar[str] = "SQS_PUBLISHER"

    queue: str
    batch_events: int = MAX_BATCH_COUNT
    message_max_size: int | str = MAX_MESSAGE_BYTES
    message_group_id: str = DEFAULT_GROUP_KEY
    message_deduplication_id: str | None = None
    queue_owner_aws_account_id: str | None = None
    region: str = "us-east-1"
    access_key_id: str | None = None
    secret_access_key: str | None = None
    session_token: str | None = None
    endpoint: str | None = None

    def _validate(self) -> None:
        if not self.queue:
            raise InvalidConfigurationError("The SQS queue name must not be empty")
        if self.batch_events > MAX_BATCH_COUNT:
            raise InvalidConfigurationError(f"The maximum batch size is {MAX_BATCH_COUNT} events")
        if self.batch_events < 1:
            raise InvalidConfigurationError("The batch size must be greater than 0")
        self.message_max_size = parse_byte_size(self.message_max_size)
        if self.message_max_size < 1:
            raise InvalidConfigurationError("The maximum message size must be greater than 0")

    @property
    def queue_is_ordered(self) -> bool:
        return is_ordered_queue(self.queue)

    def to_config(self) -> PublisherConfig:
        return PublisherConfig(
            max_batch_count=self.batch_events,
            max_message_bytes=parse_byte_size(self.message_max_size),
            queue_is_ordered=self.queue_is_ordered,
            group_key_template=self.message_group_id or DEFAULT_GROUP_KEY,
            dedup_key_template=self.message_deduplication_id or None,
        )

    def aws_options(self) -> dict[str, Any]:
        """Keyword arguments for ``boto3.client("sqs", ...)``."""
        options: dict[str, Any] = {"region_name": self.region}
        if self.access_key_id and self.secret_access_key:
            options["aws_access_key_id"] = self.access_key_id
            options["aws_secret_access_key"] = self.secret_access_key
            if self.session_token:
                options["aws_session_token"] = self.session_token
        if self.endpoint:
            options["endpoint_url"] = self.endpoint
        return options


__all__ = ["PublisherSettings", "parse_byte_size"]
