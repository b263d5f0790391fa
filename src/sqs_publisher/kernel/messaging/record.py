"""Kernel messaging – Record, BatchEntry and Batch primitives."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from typing import Any

type LocalId = str
type EventFields = Mapping[str, Any]


@dataclasses.dataclass(frozen=True)
class Record:
    """An already-serialized payload plus the event it was produced from.

    ``event`` is only consulted when ordering fields are expanded from
    templates; the payload is sent verbatim.
    """

    payload: bytes
    event: EventFields | None = None

    @property
    def size_bytes(self) -> int:
        return len(self.payload)

    @classmethod
    def of(cls, payload: bytes | str, event: EventFields | None = None) -> "Record":
        """Build a record, UTF-8 encoding ``str`` payloads."""
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return cls(payload=payload, event=event)


@dataclasses.dataclass(frozen=True)
class MessageAttributes:
    """Ordering metadata attached to a message sent to an ordered queue."""

    group_key: str | None = None
    dedup_key: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.group_key is None and self.dedup_key is None


@dataclasses.dataclass(frozen=True)
class BatchEntry:
    """A record positioned inside an outbound batch.

    ``local_id`` is the record's index in the input sequence of the
    ``publish`` call that produced it, so it stays unique within a batch and
    correlates acknowledgements back to the input.
    """

    local_id: LocalId
    record: Record
    group_key: str | None = None
    dedup_key: str | None = None

    @property
    def payload(self) -> bytes:
        return self.record.payload

    @property
    def size_bytes(self) -> int:
        return self.record.size_bytes

    @property
    def attributes(self) -> MessageAttributes:
        return MessageAttributes(group_key=self.group_key, dedup_key=self.dedup_key)

    def with_ordering(self, group_key: str, dedup_key: str) -> "BatchEntry":
        return dataclasses.replace(self, group_key=group_key, dedup_key=dedup_key)


@dataclasses.dataclass(frozen=True)
class Batch:
    """Ordered, size-bounded group of entries sent in one network call."""

    entries: tuple[BatchEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[BatchEntry]:
        return iter(self.entries)

    @property
    def size_bytes(self) -> int:
        return sum(entry.size_bytes for entry in self.entries)

    @property
    def local_ids(self) -> list[LocalId]:
        return [entry.local_id for entry in self.entries]


__all__ = ["Batch", "BatchEntry", "EventFields", "LocalId", "MessageAttributes", "Record"]
