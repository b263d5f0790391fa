"""Application batching – BatchAccumulator.

Packs admitted records into batches bounded by an entry count and a
cumulative payload size, in a single order-preserving pass.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from sqs_publisher.kernel.messaging import Batch, BatchEntry, Record


class BatchAccumulator:
    """Size- and count-bounded batch packer.

    Each :meth:`pack` call keeps its own buffer, so one accumulator may be
    shared by concurrent callers.

    Parameters
    ----------
    max_batch_count:
        Maximum number of entries per batch.
    max_payload_bytes:
        Maximum sum of payload sizes per batch.  Records are expected to fit
        on their own; a record that does not is still emitted, alone.
    """

    def __init__(self, max_batch_count: int, max_payload_bytes: int) -> None:
        if max_batch_count < 1:
            raise ValueError("max_batch_count must be >= 1")
        if max_payload_bytes < 0:
            raise ValueError("max_payload_bytes must be >= 0")
        self._max_count = max_batch_count
        self._max_bytes = max_payload_bytes

    @property
    def max_batch_count(self) -> int:
        return self._max_count

    @property
    def max_payload_bytes(self) -> int:
        return self._max_bytes

    def pack(self, records: Iterable[tuple[int, Record]]) -> Iterator[Batch]:
        """Lazily yield batches from ``(input_index, record)`` pairs.

        ``input_index`` becomes the entry's ``local_id`` so acknowledgements
        can be correlated with the caller's input sequence.
        """
        entries: list[BatchEntry] = []
        size = 0
        for index, record in records:
            if entries and (
                len(entries) + 1 > self._max_count
                or size + record.size_bytes > self._max_bytes
            ):
                yield Batch(tuple(entries))
                entries = []
                size = 0
            entries.append(BatchEntry(local_id=str(index), record=record))
            size += record.size_bytes

        if entries:
            yield Batch(tuple(entries))

    def pack_all(self, records: Iterable[Record]) -> Iterator[Batch]:
        """Pack an unindexed sequence, numbering records from zero."""
        return self.pack(enumerate(records))


__all__ = ["BatchAccumulator"]
