"""Application batching – size guard, accumulator, ordering and dispatch."""
from sqs_publisher.application.batching.accumulator import BatchAccumulator
from sqs_publisher.application.batching.config import (
    DEFAULT_GROUP_KEY,
    MAX_BATCH_COUNT,
    MAX_MESSAGE_BYTES,
    ORDERED_QUEUE_SUFFIX,
    PublisherConfig,
    is_ordered_queue,
)
from sqs_publisher.application.batching.dispatcher import Dispatcher, PublishReport
from sqs_publisher.application.batching.ordering import LazyDedupTemplate, OrderingDecorator
from sqs_publisher.application.batching.size_guard import Admission, Admitted, Rejected, admit

__all__ = [
    "DEFAULT_GROUP_KEY",
    "MAX_BATCH_COUNT",
    "MAX_MESSAGE_BYTES",
    "ORDERED_QUEUE_SUFFIX",
    "Admission",
    "Admitted",
    "BatchAccumulator",
    "Dispatcher",
    "LazyDedupTemplate",
    "OrderingDecorator",
    "PublishReport",
    "PublisherConfig",
    "Rejected",
    "admit",
    "is_ordered_queue",
]
