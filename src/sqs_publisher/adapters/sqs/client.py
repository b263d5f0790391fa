"""SQS adapter – SqsQueueClient backed by a boto3 SQS client."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sqs_publisher.kernel.errors import EndpointResolutionError, PublishError
from sqs_publisher.kernel.messaging import (
    BatchEntry,
    BatchEntryFailure,
    BatchResult,
    MessageAttributes,
    QueueClient,
)

logger = logging.getLogger(__name__)


def create_sqs_client(**aws_options: Any) -> Any:
    """Build a low-level boto3 SQS client."""
    return boto3.client("sqs", **aws_options)


def _error_code(exc: BaseException) -> str | None:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code")
    return None


def _status_code(exc: BaseException) -> int | None:
    if isinstance(exc, ClientError):
        return exc.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return None


def _body(payload: bytes, local_ids: list[str], queue_url: str | None) -> str:
    """SQS message bodies are text; payloads must be valid UTF-8."""
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PublishError(
            f"Message body is not valid UTF-8: {exc.reason}",
            queue_url=queue_url,
            error_code="InvalidMessageContents",
            detail={"local_ids": local_ids},
            cause=exc,
        ) from exc


def _ordering_params(attributes: MessageAttributes) -> dict[str, str]:
    params: dict[str, str] = {}
    if attributes.group_key is not None:
        params["MessageGroupId"] = attributes.group_key
    if attributes.dedup_key is not None:
        params["MessageDeduplicationId"] = attributes.dedup_key
    return params


class SqsQueueClient(QueueClient):
    """``QueueClient`` over ``GetQueueUrl``, ``SendMessage`` and ``SendMessageBatch``.

    Ordering fields are sent only when set, so entries bound for standard
    queues never carry them.  Retries are left to botocore's own retry
    configuration.
    """

    def __init__(self, sqs_client: Any, queue_url: str | None = None) -> None:
        self._sqs = sqs_client
        self._queue_url = queue_url

    @property
    def queue_url(self) -> str:
        if self._queue_url is None:
            raise RuntimeError("Queue URL not resolved; call resolve_queue_endpoint() first")
        return self._queue_url

    def resolve_queue_endpoint(self, queue_name: str, owner_account_id: str | None = None) -> str:
        params: dict[str, str] = {"QueueName": queue_name}
        if owner_account_id:
            params["QueueOwnerAWSAccountId"] = owner_account_id
        try:
            response = self._sqs.get_queue_url(**params)
        except (ClientError, BotoCoreError) as exc:
            logger.error("Failed to connect to SQS queue=%s error=%r", queue_name, exc)
            raise EndpointResolutionError(
                queue_name,
                owner_account_id,
                detail={"error_code": _error_code(exc)},
                cause=exc,
            ) from exc
        self._queue_url = response["QueueUrl"]
        return self._queue_url

    def send_one(self, payload: bytes, attributes: MessageAttributes) -> None:
        try:
            self._sqs.send_message(
                QueueUrl=self.queue_url,
                MessageBody=_body(payload, [], self._queue_url),
                **_ordering_params(attributes),
            )
        except (ClientError, BotoCoreError) as exc:
            raise PublishError(
                f"SendMessage failed: {exc}",
                queue_url=self._queue_url,
                error_code=_error_code(exc),
                status_code=_status_code(exc),
                cause=exc,
            ) from exc

    def send_batch(self, entries: Sequence[BatchEntry]) -> BatchResult:
        wire_entries: list[dict[str, str]] = []
        for entry in entries:
            wire = {
                "Id": entry.local_id,
                "MessageBody": _body(entry.payload, [entry.local_id], self._queue_url),
            }
            wire.update(_ordering_params(entry.attributes))
            wire_entries.append(wire)
        try:
            response = self._sqs.send_message_batch(QueueUrl=self.queue_url, Entries=wire_entries)
        except (ClientError, BotoCoreError) as exc:
            raise PublishError(
                f"SendMessageBatch failed: {exc}",
                queue_url=self._queue_url,
                error_code=_error_code(exc),
                status_code=_status_code(exc),
                detail={"local_ids": [entry.local_id for entry in entries]},
                cause=exc,
            ) from exc
        return BatchResult(
            successful=tuple(item["Id"] for item in response.get("Successful", [])),
            failed=tuple(
                BatchEntryFailure(
                    local_id=item["Id"],
                    code=item.get("Code", ""),
                    message=item.get("Message", ""),
                    sender_fault=bool(item.get("SenderFault", True)),
                )
                for item in response.get("Failed", [])
            ),
        )


__all__ = ["SqsQueueClient", "create_sqs_client"]
