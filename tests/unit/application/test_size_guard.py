"""Unit tests for SizeGuard admission."""

from __future__ import annotations

import logging

import pytest

from sqs_publisher.application.batching import Admitted, Rejected, admit
from sqs_publisher.application.batching.size_guard import report_rejection
from sqs_publisher.kernel.messaging import Record


class TestAdmit:
    def test_admits_record_at_limit(self) -> None:
        record = Record(b"x" * 10)
        assert admit(record, 10) == Admitted(record)

    def test_rejects_record_over_limit(self) -> None:
        record = Record(b"x" * 11)
        result = admit(record, 10)
        assert isinstance(result, Rejected)
        assert result.reason == "oversized"
        assert result.record is record

    def test_admits_zero_length_payload(self) -> None:
        assert isinstance(admit(Record(b""), 0), Admitted)

    def test_rejects_300000_bytes_at_default_limit(self) -> None:
        assert isinstance(admit(Record(b"x" * 300_000), 262_144), Rejected)


class TestReportRejection:
    def test_logs_warning_with_size(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="sqs_publisher.application.batching.size_guard"):
            report_rejection(Rejected(Record(b"x" * 20)), 10)
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "message_size=20" in caplog.records[0].getMessage()
