"""
Pydantic Schemas - Data Validation Models

Defines all Pydantic schemas used by the enrichment pipeline:
- Firehose transformation event and response (wire format)
- Telemetry payloads before and after enrichment
- Partition keys and per-record transformation results

Usage:
    from utils.schemas import TelemetryEvent

    event = TelemetryEvent(**raw_data)
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

MetricValue = Union[StrictInt, StrictFloat]


class TelemetryEvent(BaseModel):
    """Decoded device telemetry payload.

    Validates against:
    - deviceName: string, non-empty
    - messageTime: integer, epoch milliseconds
    - metrics: mapping of metric name to number

    Unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    deviceName: StrictStr = Field(..., min_length=1, description="Device name")
    messageTime: StrictInt = Field(..., description="Epoch milliseconds")
    metrics: dict[StrictStr, MetricValue] = Field(..., description="Metric values")


class EnrichedEvent(BaseModel):
    """Telemetry payload with messageTime replaced by calendar fields.

    Field order matches the line written downstream:
    deviceName, metrics, date, hour, minute, second.
    """

    model_config = ConfigDict(frozen=True)

    deviceName: str
    metrics: dict[str, MetricValue]
    date: str = Field(..., pattern=r"^\d{4}/\d{2}/\d{2}$", description="YYYY/MM/DD")
    hour: str = Field(..., pattern=r"^\d{2}$")
    minute: str = Field(..., pattern=r"^\d{2}$")
    second: str = Field(..., pattern=r"^\d{2}$")


class PartitionKey(BaseModel):
    """Storage routing key derived from an enriched event."""

    model_config = ConfigDict(frozen=True)

    deviceName: str
    date: str

    def as_metadata(self, lowercase: bool = False) -> dict[str, str]:
        """Render as a partitionKeys mapping.

        Args:
            lowercase: Use lower-case key names for catalogs with
                case-insensitive identifiers

        Returns:
            Mapping of partition key name to value
        """
        if lowercase:
            return {"devicename": self.deviceName, "date": self.date}
        return {"deviceName": self.deviceName, "date": self.date}


class RawRecord(BaseModel):
    """One record delivered by the buffering pipeline."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    recordId: str = Field(..., description="Delivery record identifier")
    # Any value is accepted here; decode_payload rejects non-strings per record
    data: Any = Field(default=None, description="Base64-encoded payload")
    approximateArrivalTimestamp: Optional[int] = Field(default=None)


class TransformationEvent(BaseModel):
    """Batch of records handed to the transformation hook."""

    model_config = ConfigDict(extra="ignore")

    invocationId: Optional[str] = Field(default=None)
    deliveryStreamArn: Optional[str] = Field(default=None)
    region: Optional[str] = Field(default=None)
    records: list[RawRecord] = Field(default_factory=list)


class ResultStatus(str, Enum):
    OK = "Ok"
    PROCESSING_FAILED = "ProcessingFailed"


class RecordFailure(BaseModel):
    """Error indicator attached to a failed record."""

    model_config = ConfigDict(frozen=True)

    kind: str
    message: str


class TransformResult(BaseModel):
    """Outcome for a single input record.

    On success data holds the re-encoded enriched line and partition_key is
    set. On failure data holds the original payload and error is set.
    """

    model_config = ConfigDict(frozen=True)

    recordId: str
    result: ResultStatus
    data: Any
    partition_key: Optional[PartitionKey] = None
    error: Optional[RecordFailure] = None

    @property
    def ok(self) -> bool:
        return self.result is ResultStatus.OK


class TransformationResponseRecord(BaseModel):
    """Wire shape of a single transformed record."""

    recordId: str
    result: ResultStatus
    data: str
    metadata: Optional[dict[str, dict[str, str]]] = None


class TransformationResponse(BaseModel):
    """Wire shape returned to the buffering pipeline."""

    records: list[TransformationResponseRecord]
