"""Shared pytest fixtures."""

import base64
from datetime import timedelta, timezone
from typing import Any

import orjson
import pytest

from apps.enricher.enricher import RecordEnricher
from apps.enricher.transformer import BatchTransformer
from utils.schemas import RawRecord

JST = timezone(timedelta(hours=9))

# 2025-01-01T00:00:00Z
NEW_YEAR_2025_MS = 1735689600000


def encode(payload: Any) -> str:
    """Base64-frame a JSON-serializable payload the way the pipeline delivers it."""
    return base64.b64encode(orjson.dumps(payload)).decode("ascii")


def make_record(record_id: str, payload: Any) -> RawRecord:
    return RawRecord(recordId=record_id, data=encode(payload))


def telemetry(
    device_name: str = "device1",
    message_time: Any = NEW_YEAR_2025_MS,
    metrics: Any = None,
) -> dict[str, Any]:
    return {
        "deviceName": device_name,
        "messageTime": message_time,
        "metrics": {"metric1": 0.5} if metrics is None else metrics,
    }


@pytest.fixture
def enricher() -> RecordEnricher:
    return RecordEnricher(JST)


@pytest.fixture
def transformer(enricher: RecordEnricher) -> BatchTransformer:
    return BatchTransformer(enricher)
