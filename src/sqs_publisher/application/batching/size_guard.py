"""Application batching – SizeGuard admission check."""
from __future__ import annotations

import dataclasses
import logging
from typing import Literal

from sqs_publisher.kernel.messaging import Record

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Admitted:
    record: Record


@dataclasses.dataclass(frozen=True)
class Rejected:
    record: Record
    reason: Literal["oversized"] = "oversized"


type Admission = Admitted | Rejected


def admit(record: Record, max_message_bytes: int) -> Admission:
    """Reject records larger than ``max_message_bytes``; admit everything else."""
    if record.size_bytes > max_message_bytes:
        return Rejected(record)
    return Admitted(record)


def report_rejection(rejection: Rejected, max_message_bytes: int) -> None:
    logger.warning(
        "Message exceeds maximum length and will be dropped message_size=%d max_message_bytes=%d",
        rejection.record.size_bytes,
        max_message_bytes,
    )


__all__ = ["Admission", "Admitted", "Rejected", "admit", "report_rejection"]
