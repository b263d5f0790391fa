"""Kernel messaging – queue client port and publish results."""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Sequence

from sqs_publisher.kernel.messaging.record import BatchEntry, LocalId, MessageAttributes


@dataclasses.dataclass(frozen=True)
class BatchEntryFailure:
    """A single entry the queue service refused inside an otherwise accepted batch."""

    local_id: LocalId
    code: str
    message: str = ""
    sender_fault: bool = True


@dataclasses.dataclass(frozen=True)
class BatchResult:
    """Per-entry outcome of one ``send_batch`` call."""

    successful: tuple[LocalId, ...] = ()
    failed: tuple[BatchEntryFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed


class QueueClient(abc.ABC):
    """Port: the remote queue the publisher writes to.

    Implementations raise :class:`~sqs_publisher.kernel.errors.EndpointResolutionError`
    from :meth:`resolve_queue_endpoint` and
    :class:`~sqs_publisher.kernel.errors.PublishError` from the send methods.
    Retries, if any, happen inside the implementation.
    """

    @abc.abstractmethod
    def resolve_queue_endpoint(self, queue_name: str, owner_account_id: str | None = None) -> str: ...

    @abc.abstractmethod
    def send_one(self, payload: bytes, attributes: MessageAttributes) -> None: ...

    @abc.abstractmethod
    def send_batch(self, entries: Sequence[BatchEntry]) -> BatchResult: ...


__all__ = ["BatchEntryFailure", "BatchResult", "QueueClient"]
