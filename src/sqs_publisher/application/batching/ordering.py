"""Application batching – OrderingDecorator for ordered (FIFO) queues."""
from __future__ import annotations

import threading
import uuid
from collections.abc import Callable

from sqs_publisher.application.batching.config import PublisherConfig
from sqs_publisher.kernel.messaging import BatchEntry, EventFields, MessageAttributes
from sqs_publisher.kernel.templating import FieldReferenceRenderer, TemplateRenderer

TokenFactory = Callable[[], str]


def _uuid_token() -> str:
    return str(uuid.uuid4())


class LazyDedupTemplate:
    """Deduplication template, replaced by a random token on first use when unset.

    The token is generated at most once per instance, even under concurrent
    first use; every later call returns the same template.
    """

    def __init__(self, configured: str | None, token_factory: TokenFactory = _uuid_token) -> None:
        self._value = configured or None
        self._token_factory = token_factory
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._value is not None

    def get(self) -> str:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._token_factory()
            return self._value


class OrderingDecorator:
    """Attaches group and deduplication keys to entries bound for ordered queues.

    Both keys are templates expanded against the record's originating event
    with the injected :class:`TemplateRenderer`.
    """

    def __init__(
        self,
        config: PublisherConfig,
        renderer: TemplateRenderer | None = None,
        dedup_template: LazyDedupTemplate | None = None,
    ) -> None:
        self._group_template = config.group_key_template
        self._renderer = renderer or FieldReferenceRenderer()
        self._dedup_template = dedup_template or LazyDedupTemplate(config.dedup_key_template)

    @property
    def dedup_template(self) -> LazyDedupTemplate:
        return self._dedup_template

    def keys(self, event: EventFields | None) -> tuple[str, str]:
        """Return the expanded ``(group_key, dedup_key)`` for *event*."""
        group_key = self._renderer.render(self._group_template, event)
        dedup_key = self._renderer.render(self._dedup_template.get(), event)
        return group_key, dedup_key

    def attributes(self, event: EventFields | None) -> MessageAttributes:
        group_key, dedup_key = self.keys(event)
        return MessageAttributes(group_key=group_key, dedup_key=dedup_key)

    def decorate(self, entry: BatchEntry, event: EventFields | None = None) -> BatchEntry:
        if event is None:
            event = entry.record.event
        group_key, dedup_key = self.keys(event)
        return entry.with_ordering(group_key, dedup_key)


__all__ = ["LazyDedupTemplate", "OrderingDecorator", "TokenFactory"]
