"""Testing generators – property-based strategies."""
from sqs_publisher.testing.generators.strategies import record_list_strategy, record_strategy

__all__ = ["record_list_strategy", "record_strategy"]
