"""Kernel messaging – record primitives and the queue client port."""
from sqs_publisher.kernel.messaging.ports import BatchEntryFailure, BatchResult, QueueClient
from sqs_publisher.kernel.messaging.record import (
    Batch,
    BatchEntry,
    EventFields,
    LocalId,
    MessageAttributes,
    Record,
)

__all__ = [
    "Batch",
    "BatchEntry",
    "BatchEntryFailure",
    "BatchResult",
    "EventFields",
    "LocalId",
    "MessageAttributes",
    "QueueClient",
    "Record",
]
