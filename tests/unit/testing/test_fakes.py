"""Unit tests for testing fakes and generators."""

from __future__ import annotations

import pytest
from hypothesis import given

from sqs_publisher.kernel.errors import EndpointResolutionError, PublishError
from sqs_publisher.kernel.messaging import BatchEntry, MessageAttributes, Record
from sqs_publisher.testing.fakes import InMemoryQueueClient, SentMessage
from sqs_publisher.testing.generators import record_list_strategy, record_strategy


class TestInMemoryQueueClient:
    def test_resolves_known_queue(self) -> None:
        client = InMemoryQueueClient({"orders": "mem://orders"})
        assert client.resolve_queue_endpoint("orders") == "mem://orders"

    def test_unknown_queue_raises(self) -> None:
        with pytest.raises(EndpointResolutionError):
            InMemoryQueueClient().resolve_queue_endpoint("nope", "123")

    def test_records_single_sends(self) -> None:
        client = InMemoryQueueClient()
        client.send_one(b"x", MessageAttributes("g", "d"))
        assert client.single_calls == [SentMessage(b"x", MessageAttributes("g", "d"))]

    def test_records_batches_and_fails_selected_ids(self) -> None:
        client = InMemoryQueueClient(fail_ids={"1"})
        result = client.send_batch([BatchEntry("0", Record(b"a")), BatchEntry("1", Record(b"b"))])
        assert result.successful == ("0",)
        assert [f.local_id for f in result.failed] == ["1"]
        assert [e.local_id for e in client.sent_entries] == ["0", "1"]

    def test_raises_configured_error(self) -> None:
        client = InMemoryQueueClient(error=PublishError("boom"))
        with pytest.raises(PublishError):
            client.send_batch([])

    def test_clear(self) -> None:
        client = InMemoryQueueClient()
        client.send_one(b"x", MessageAttributes())
        client.clear()
        assert client.single_calls == []


class TestRecordStrategies:
    @given(record_strategy(max_size=100))
    def test_record_sizes_bounded(self, record: Record) -> None:
        assert 0 <= record.size_bytes <= 100
        assert record.event == {"size": record.size_bytes}

    @given(record_list_strategy(max_size=10, max_records=5))
    def test_record_lists_bounded(self, records: list[Record]) -> None:
        assert len(records) <= 5
