"""Unit tests for kernel messaging records and batches."""

from __future__ import annotations

import pytest

from sqs_publisher.kernel.messaging import Batch, BatchEntry, BatchResult, BatchEntryFailure, MessageAttributes, Record


class TestRecord:
    def test_size_is_byte_length(self) -> None:
        assert Record(b"hello").size_bytes == 5

    def test_size_counts_utf8_bytes_not_characters(self) -> None:
        record = Record.of("héllo")
        assert record.payload == "héllo".encode()
        assert record.size_bytes == 6

    def test_empty_payload(self) -> None:
        assert Record(b"").size_bytes == 0

    def test_of_keeps_bytes_and_event(self) -> None:
        record = Record.of(b"x", {"id": 1})
        assert record.payload == b"x"
        assert record.event == {"id": 1}

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Record(b"x").payload = b"y"  # type: ignore[misc]


class TestBatchEntry:
    def test_delegates_to_record(self) -> None:
        entry = BatchEntry("3", Record(b"abc"))
        assert entry.payload == b"abc"
        assert entry.size_bytes == 3

    def test_attributes_empty_by_default(self) -> None:
        assert BatchEntry("0", Record(b"")).attributes.is_empty

    def test_with_ordering_returns_copy(self) -> None:
        entry = BatchEntry("0", Record(b"a"))
        ordered = entry.with_ordering("g", "d")
        assert ordered.attributes == MessageAttributes(group_key="g", dedup_key="d")
        assert entry.group_key is None
        assert ordered.local_id == "0"


class TestBatch:
    def test_size_and_len(self) -> None:
        batch = Batch((BatchEntry("0", Record(b"ab")), BatchEntry("1", Record(b"cde"))))
        assert len(batch) == 2
        assert batch.size_bytes == 5
        assert batch.local_ids == ["0", "1"]
        assert [e.local_id for e in batch] == ["0", "1"]


class TestBatchResult:
    def test_ok_without_failures(self) -> None:
        assert BatchResult(successful=("0",)).ok

    def test_not_ok_with_failures(self) -> None:
        assert not BatchResult(failed=(BatchEntryFailure("0", "InternalError"),)).ok
