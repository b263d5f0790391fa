"""Application batching – Dispatcher.

Chooses between batch and single-message publishing and drives records
through admission, packing and ordering before handing them to the
:class:`~sqs_publisher.kernel.messaging.QueueClient`.
"""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator

from sqs_publisher.application.batching.accumulator import BatchAccumulator
from sqs_publisher.application.batching.config import PublisherConfig
from sqs_publisher.application.batching.ordering import LazyDedupTemplate, OrderingDecorator
from sqs_publisher.application.batching.size_guard import Rejected, admit, report_rejection
from sqs_publisher.kernel.messaging import (
    Batch,
    BatchEntryFailure,
    MessageAttributes,
    QueueClient,
    Record,
)
from sqs_publisher.kernel.templating import TemplateRenderer

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class PublishReport:
    """Outcome of one ``publish`` call.

    ``failed`` holds the per-entry failures reported by the queue service,
    unchanged; they are neither retried nor re-split.
    """

    sent: int = 0
    dropped: int = 0
    calls: int = 0
    failed: tuple[BatchEntryFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed


class Dispatcher:
    """Publishes record sequences to one queue.

    ``max_batch_count > 1`` publishes with one ``send_batch`` call per packed
    batch; ``max_batch_count == 1`` publishes each record with ``send_one``.
    Calls are sequential and preserve input order.  The only state shared
    between calls is the lazily generated deduplication template, so one
    instance may serve concurrent callers.
    """

    def __init__(
        self,
        client: QueueClient,
        config: PublisherConfig,
        renderer: TemplateRenderer | None = None,
        dedup_template: LazyDedupTemplate | None = None,
    ) -> None:
        self._client = client
        self._config = config
        self._ordering: OrderingDecorator | None = None
        if config.queue_is_ordered:
            self._ordering = OrderingDecorator(config, renderer, dedup_template)

    @property
    def config(self) -> PublisherConfig:
        return self._config

    @property
    def ordering(self) -> OrderingDecorator | None:
        return self._ordering

    def publish(self, records: Iterable[Record]) -> PublishReport:
        if self._config.uses_batch_mode:
            return self._publish_batches(records)
        return self._publish_single(records)

    def _admitted(self, records: Iterable[Record], limit: int, dropped: list[int]) -> Iterator[tuple[int, Record]]:
        for index, record in enumerate(records):
            admission = admit(record, limit)
            if isinstance(admission, Rejected):
                report_rejection(admission, limit)
                dropped.append(index)
                continue
            yield index, record

    def _publish_batches(self, records: Iterable[Record]) -> PublishReport:
        # Admitted records must fit a whole batch as well as a single message.
        limit = min(self._config.max_message_bytes, self._config.batch_payload_limit)
        accumulator = BatchAccumulator(self._config.max_batch_count, self._config.batch_payload_limit)
        dropped: list[int] = []
        sent = 0
        calls = 0
        failed: list[BatchEntryFailure] = []

        for batch in accumulator.pack(self._admitted(records, limit, dropped)):
            batch = self._decorate(batch)
            logger.debug(
                "Publishing %d messages to SQS local_ids=%s size_bytes=%d",
                len(batch),
                batch.local_ids,
                batch.size_bytes,
            )
            result = self._client.send_batch(batch.entries)
            calls += 1
            sent += len(batch) - len(result.failed)
            for failure in result.failed:
                logger.error(
                    "sqs.batch_entry_failed local_id=%s code=%s sender_fault=%s message=%s",
                    failure.local_id,
                    failure.code,
                    failure.sender_fault,
                    failure.message,
                )
            failed.extend(result.failed)

        return PublishReport(sent=sent, dropped=len(dropped), calls=calls, failed=tuple(failed))

    def _publish_single(self, records: Iterable[Record]) -> PublishReport:
        limit = self._config.max_message_bytes
        dropped: list[int] = []
        sent = 0

        for _, record in self._admitted(records, limit, dropped):
            attributes = MessageAttributes()
            if self._ordering is not None:
                attributes = self._ordering.attributes(record.event)
            logger.debug("Publishing one message to SQS size_bytes=%d", record.size_bytes)
            self._client.send_one(record.payload, attributes)
            sent += 1

        return PublishReport(sent=sent, dropped=len(dropped), calls=sent)

    def _decorate(self, batch: Batch) -> Batch:
        if self._ordering is None:
            return batch
        ordering = self._ordering
        return Batch(tuple(ordering.decorate(entry) for entry in batch.entries))


__all__ = ["Dispatcher", "PublishReport"]
