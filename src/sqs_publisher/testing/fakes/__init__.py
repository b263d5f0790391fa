"""Testing fakes – in-memory doubles for kernel ports."""
from sqs_publisher.testing.fakes.queue_client import InMemoryQueueClient, SentMessage

__all__ = ["InMemoryQueueClient", "SentMessage"]
