"""SQS adapter – boto3 queue client and settings-driven publisher."""
from sqs_publisher.adapters.sqs.client import SqsQueueClient, create_sqs_client
from sqs_publisher.adapters.sqs.publisher import SqsPublisher

__all__ = ["SqsPublisher", "SqsQueueClient", "create_sqs_client"]
