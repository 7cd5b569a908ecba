"""
Firehose Handler - Record Transformation Entry Point

Lambda-style entry point invoked by the buffering pipeline with a batch of
records. Adds calendar fields in the configured timezone and returns the
records as JSON lines with dynamic partition keys (deviceName, date).

Features:
- Wire event validation via Pydantic schemas
- Process-wide transformer built once from settings
- Per-record failure isolation (ProcessingFailed results)
- Structured logging

Usage:
    from apps.enricher.handler import handler

    response = handler({"records": [...]}, None)
"""

import logging
from functools import lru_cache
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from apps.enricher.enricher import RecordEnricher
from apps.enricher.transformer import BatchTransformer
from utils.config import settings
from utils.logging import setup_logging
from utils.schemas import TransformationEvent, TransformationResponse
from utils.timezones import resolve_timezone

# Configure logging
setup_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

logger = logging.getLogger(__name__)


@lru_cache()
def get_transformer() -> BatchTransformer:
    """Get the process-wide transformer, built from settings on first use.

    Raises:
        ConfigurationError: If TIMEZONE cannot be resolved
    """
    tz = resolve_timezone(settings.TIMEZONE)
    logger.info(
        "Transformer initialized: timezone=%s, lowercase_keys=%s",
        settings.TIMEZONE,
        settings.PARTITION_KEYS_LOWERCASE,
        extra={
            "app_name": settings.APP_NAME,
            "app_version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        },
    )
    return BatchTransformer(
        RecordEnricher(tz),
        lowercase_keys=settings.PARTITION_KEYS_LOWERCASE,
    )


def reset_transformer() -> None:
    """Drop the cached transformer so the next call rereads settings."""
    get_transformer.cache_clear()


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """
    Transform a batch of delivered records.

    Args:
        event: Transformation event with a "records" list
        context: Invocation context (unused)

    Returns:
        Response dict {"records": [...]} with one entry per input record

    Raises:
        pydantic.ValidationError: If the event is not a transformation event
    """
    try:
        batch = TransformationEvent.model_validate(event)
    except PydanticValidationError as e:
        logger.error(
            "Invalid transformation event",
            extra={"error": str(e).split("\n")[0]},
        )
        raise

    transformer = get_transformer()
    results = transformer.transform(batch.records)

    failed = sum(1 for result in results if not result.ok)
    logger.info(
        "Batch transformed: invocation=%s, total=%d, ok=%d, failed=%d",
        batch.invocationId,
        len(results),
        len(results) - failed,
        failed,
    )

    response = TransformationResponse(
        records=[transformer.render(result) for result in results]
    )
    return response.model_dump(mode="json", exclude_none=True)
