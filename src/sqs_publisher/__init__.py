"""
sqs_publisher – batched publishing to Amazon SQS queues.

Import path convention::

    from sqs_publisher.kernel.messaging import Record
    from sqs_publisher.application.batching import Dispatcher
    from sqs_publisher.adapters.sqs import SqsPublisher
    from sqs_publisher.config.settings import PublisherSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
