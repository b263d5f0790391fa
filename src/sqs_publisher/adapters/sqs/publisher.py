"""SQS adapter – SqsPublisher, settings-driven entry point."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqs_publisher.adapters.sqs.client import SqsQueueClient, create_sqs_client
from sqs_publisher.application.batching import Dispatcher, PublishReport
from sqs_publisher.config.settings import PublisherSettings
from sqs_publisher.config.validation import InvalidConfigurationError
from sqs_publisher.kernel.errors import EndpointResolutionError
from sqs_publisher.kernel.messaging import EventFields, QueueClient, Record
from sqs_publisher.kernel.templating import TemplateRenderer

logger = logging.getLogger(__name__)


class SqsPublisher:
    """Publishes encoded events to one SQS queue.

    Build with :meth:`from_settings`, which resolves the queue URL once and
    fails fast when the queue cannot be reached.

    Example::

        settings = SettingsFactory.create(PublisherSettings, [EnvSettingsLoader()])
        publisher = SqsPublisher.from_settings(settings)
        publisher.publish_encoded([(event, json.dumps(event))])
    """

    def __init__(self, client: QueueClient, dispatcher: Dispatcher, queue_url: str) -> None:
        self._client = client
        self._dispatcher = dispatcher
        self._queue_url = queue_url

    @classmethod
    def from_settings(
        cls,
        settings: PublisherSettings,
        sqs_client: Any | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> "SqsPublisher":
        config = settings.to_config()
        if sqs_client is None:
            sqs_client = create_sqs_client(**settings.aws_options())
        client = SqsQueueClient(sqs_client)

        params = {"queue": settings.queue, "region": settings.region}
        if settings.queue_owner_aws_account_id:
            params["queue_owner_aws_account_id"] = settings.queue_owner_aws_account_id
        logger.debug("Connecting to SQS queue %s", params)
        try:
            queue_url = client.resolve_queue_endpoint(settings.queue, settings.queue_owner_aws_account_id)
        except EndpointResolutionError as exc:
            raise InvalidConfigurationError(
                "Verify the SQS queue name and your credentials",
                detail=params,
                cause=exc,
            ) from exc
        logger.info("Connected to SQS queue successfully %s", params)

        return cls(client, Dispatcher(client, config, renderer), queue_url)

    @property
    def queue_url(self) -> str:
        return self._queue_url

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def publish(self, records: Iterable[Record]) -> PublishReport:
        return self._dispatcher.publish(records)

    def publish_encoded(self, encoded: Iterable[tuple[EventFields | None, bytes | str]]) -> PublishReport:
        """Publish ``(event, payload)`` pairs; ``str`` payloads are UTF-8 encoded."""
        return self._dispatcher.publish(Record.of(payload, event) for event, payload in encoded)


__all__ = ["SqsPublisher"]
