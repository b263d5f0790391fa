"""Application batching – PublisherConfig and service ceilings."""
from __future__ import annotations

import dataclasses

from sqs_publisher.config.validation import InvalidConfigurationError

MAX_BATCH_COUNT = 10
MAX_MESSAGE_BYTES = 256 * 1024
ORDERED_QUEUE_SUFFIX = ".fifo"
DEFAULT_GROUP_KEY = "default"


def is_ordered_queue(queue_name: str) -> bool:
    """Ordered (FIFO) queues are named with a ``.fifo`` suffix."""
    return queue_name.endswith(ORDERED_QUEUE_SUFFIX)


@dataclasses.dataclass(frozen=True)
class PublisherConfig:
    """Immutable batching configuration shared by every ``publish`` call.

    ``max_payload_bytes`` bounds the cumulative size of one batch and
    defaults to ``max_message_bytes``.
    """

    max_batch_count: int = MAX_BATCH_COUNT
    max_message_bytes: int = MAX_MESSAGE_BYTES
    max_payload_bytes: int | None = None
    queue_is_ordered: bool = False
    group_key_template: str = DEFAULT_GROUP_KEY
    dedup_key_template: str | None = None

    def __post_init__(self) -> None:
        if self.max_batch_count > MAX_BATCH_COUNT:
            raise InvalidConfigurationError(
                f"The maximum batch size is {MAX_BATCH_COUNT} events",
                detail={"max_batch_count": self.max_batch_count},
            )
        if self.max_batch_count < 1:
            raise InvalidConfigurationError(
                "The batch size must be greater than 0",
                detail={"max_batch_count": self.max_batch_count},
            )
        if self.max_message_bytes < 1:
            raise InvalidConfigurationError(
                "The maximum message size must be greater than 0",
                detail={"max_message_bytes": self.max_message_bytes},
            )
        if self.queue_is_ordered and not self.group_key_template:
            raise InvalidConfigurationError(
                "Ordered queues require a non-empty message group template",
                detail={"group_key_template": self.group_key_template},
            )
        if self.max_payload_bytes is None:
            object.__setattr__(self, "max_payload_bytes", self.max_message_bytes)
        elif self.max_payload_bytes < 1:
            raise InvalidConfigurationError(
                "The maximum batch payload size must be greater than 0",
                detail={"max_payload_bytes": self.max_payload_bytes},
            )

    @property
    def batch_payload_limit(self) -> int:
        return self.max_payload_bytes or self.max_message_bytes

    @property
    def uses_batch_mode(self) -> bool:
        return self.max_batch_count > 1


__all__ = [
    "DEFAULT_GROUP_KEY",
    "MAX_BATCH_COUNT",
    "MAX_MESSAGE_BYTES",
    "ORDERED_QUEUE_SUFFIX",
    "PublisherConfig",
    "is_ordered_queue",
]
