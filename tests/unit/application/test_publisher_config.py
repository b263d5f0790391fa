"""Unit tests for PublisherConfig validation."""

from __future__ import annotations

import pytest

from sqs_publisher.application.batching import PublisherConfig, is_ordered_queue
from sqs_publisher.config.validation import InvalidConfigurationError


class TestPublisherConfig:
    def test_defaults(self) -> None:
        config = PublisherConfig()
        assert config.max_batch_count == 10
        assert config.max_message_bytes == 262_144
        assert config.max_payload_bytes == 262_144
        assert config.group_key_template == "default"
        assert config.dedup_key_template is None
        assert config.queue_is_ordered is False
        assert config.uses_batch_mode

    def test_payload_limit_defaults_to_message_limit(self) -> None:
        assert PublisherConfig(max_message_bytes=1000).batch_payload_limit == 1000

    def test_explicit_payload_limit(self) -> None:
        assert PublisherConfig(max_payload_bytes=256_000).batch_payload_limit == 256_000

    def test_single_mode(self) -> None:
        assert not PublisherConfig(max_batch_count=1).uses_batch_mode

    def test_batch_count_above_ten_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="maximum batch size is 10"):
            PublisherConfig(max_batch_count=11)

    def test_batch_count_below_one_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="greater than 0"):
            PublisherConfig(max_batch_count=0)

    def test_non_positive_message_size_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            PublisherConfig(max_message_bytes=0)

    def test_non_positive_payload_size_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            PublisherConfig(max_payload_bytes=0)

    def test_ordered_queue_requires_group_template(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="non-empty message group"):
            PublisherConfig(queue_is_ordered=True, group_key_template="")

    def test_standard_queue_ignores_group_template(self) -> None:
        assert PublisherConfig(group_key_template="").group_key_template == ""

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            PublisherConfig().max_batch_count = 3  # type: ignore[misc]


class TestIsOrderedQueue:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("orders.fifo", True), ("orders", False), ("orders-fifo", False), ("fifo.orders", False)],
    )
    def test_detects_suffix(self, name: str, expected: bool) -> None:
        assert is_ordered_queue(name) is expected
