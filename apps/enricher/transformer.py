"""
Batch Transformer - Decode, Enrich, Re-encode

Drives a batch of delivered records through the enrichment pipeline:

    base64 -> JSON object -> TelemetryEvent -> EnrichedEvent -> JSON line -> base64

Each record is processed independently. Decode, validation and timestamp
failures become a ProcessingFailed result for that record only; the rest of
the batch is unaffected. Output order and length always match the input.
"""

import base64
import binascii
import logging
from typing import Any, Sequence

import orjson
from pydantic import ValidationError as PydanticValidationError

from apps.enricher.enricher import RecordEnricher, derive_partition_key
from apps.enricher.errors import DecodeError, RecordError, ValidationError
from utils.schemas import (
    EnrichedEvent,
    RawRecord,
    RecordFailure,
    ResultStatus,
    TelemetryEvent,
    TransformationResponseRecord,
    TransformResult,
)

logger = logging.getLogger(__name__)


def decode_payload(data: Any) -> dict[str, Any]:
    """
    Decode a base64-framed JSON object.

    Args:
        data: Base64 text as delivered by the buffering pipeline

    Returns:
        Decoded JSON object

    Raises:
        DecodeError: If data is not a string, the framing, encoding or JSON
            is invalid, or the payload is not a JSON object
    """
    if not isinstance(data, str):
        raise DecodeError(f"Payload must be base64 text, got {type(data).__name__}")

    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 payload: {e}") from e

    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON payload: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError(f"Payload must be a JSON object, got {type(payload).__name__}")

    return payload


def parse_event(payload: dict[str, Any]) -> TelemetryEvent:
    """
    Validate a decoded payload as a telemetry event.

    Raises:
        ValidationError: If a required field is missing or has the wrong type
    """
    try:
        return TelemetryEvent.model_validate(payload)
    except PydanticValidationError as e:
        # First line of the pydantic report is enough for the error output
        first_error = e.errors()[0]
        location = ".".join(str(part) for part in first_error["loc"])
        raise ValidationError(f"{location}: {first_error['msg']}") from e


def to_json_line(event: EnrichedEvent) -> bytes:
    """Serialize an enriched event as one JSON line ending in a single newline."""
    return orjson.dumps(event.model_dump()) + b"\n"


class BatchTransformer:
    """
    Transforms batches of delivered records into per-record results.

    Handles:
    - Payload decoding and validation
    - Enrichment and partition key derivation
    - Line-delimited re-encoding
    - Per-record failure isolation
    """

    def __init__(self, enricher: RecordEnricher, lowercase_keys: bool = False) -> None:
        """
        Initialize batch transformer.

        Args:
            enricher: Enricher configured with the process timezone
            lowercase_keys: Emit lower-case partition key names
        """
        self.enricher = enricher
        self.lowercase_keys = lowercase_keys

    def transform_one(self, record: RawRecord) -> TransformResult:
        """
        Transform a single record.

        Never raises for record-level problems; they are reported in the
        returned result.

        Args:
            record: Delivered record

        Returns:
            Ok result with the enriched line, or ProcessingFailed result
            carrying the original payload
        """
        try:
            event = parse_event(decode_payload(record.data))
            enriched = self.enricher.enrich(event)
        except RecordError as e:
            logger.warning(
                "Record transformation failed: recordId=%s, kind=%s, error=%s",
                record.recordId,
                e.kind,
                str(e),
            )
            return TransformResult(
                recordId=record.recordId,
                result=ResultStatus.PROCESSING_FAILED,
                data=record.data,
                error=RecordFailure(kind=e.kind, message=str(e)),
            )

        line = to_json_line(enriched)

        logger.debug("Record transformed: recordId=%s", record.recordId)

        return TransformResult(
            recordId=record.recordId,
            result=ResultStatus.OK,
            data=base64.b64encode(line).decode("ascii"),
            partition_key=derive_partition_key(enriched),
        )

    def transform(self, records: Sequence[RawRecord]) -> list[TransformResult]:
        """
        Transform a batch of records.

        Args:
            records: Delivered records

        Returns:
            One result per input record, in input order
        """
        return [self.transform_one(record) for record in records]

    def render(self, result: TransformResult) -> TransformationResponseRecord:
        """
        Render a result in the buffering pipeline's response format.

        Args:
            result: Per-record result

        Returns:
            Response record; metadata.partitionKeys is set on success only
        """
        metadata = None
        if result.partition_key is not None:
            metadata = {
                "partitionKeys": result.partition_key.as_metadata(self.lowercase_keys)
            }
        return TransformationResponseRecord(
            recordId=result.recordId,
            result=result.result,
            # wire data is always base64 text
            data=result.data if isinstance(result.data, str) else "",
            metadata=metadata,
        )
