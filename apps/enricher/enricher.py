"""
Record Enricher - Calendar Fields and Partition Keys

Replaces a telemetry event's epoch-millisecond messageTime with calendar
fields (date, hour, minute, second) computed in a fixed timezone, and
projects the partition key used by the storage layer.

The enriched fields must match the catalog table schema:
- partition columns: devicename, date
- columns: hour, minute, second, metrics

Usage:
    from datetime import timedelta, timezone

    enricher = RecordEnricher(timezone(timedelta(hours=9)))
    enriched = enricher.enrich(event)
    key = derive_partition_key(enriched)
"""

from datetime import datetime, timedelta, timezone, tzinfo

from apps.enricher.errors import MalformedTimestamp
from utils.schemas import EnrichedEvent, PartitionKey, TelemetryEvent

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_civil(message_time: int, tz: tzinfo) -> datetime:
    """
    Convert epoch milliseconds to a civil date-time in the given zone.

    Sub-second precision is floored, so -1 is the last second of 1969.

    Args:
        message_time: Epoch milliseconds
        tz: Target timezone

    Returns:
        Timezone-aware datetime in tz

    Raises:
        MalformedTimestamp: If the instant falls outside years 1..9999 in tz
    """
    try:
        return (UNIX_EPOCH + timedelta(milliseconds=message_time)).astimezone(tz)
    except (OverflowError, ValueError) as e:
        raise MalformedTimestamp(
            f"messageTime out of calendar range: {message_time}"
        ) from e


class RecordEnricher:
    """Adds calendar fields to telemetry events in a fixed timezone."""

    def __init__(self, tz: tzinfo) -> None:
        """
        Initialize enricher.

        Args:
            tz: Timezone the calendar fields are expressed in
        """
        self.tz = tz

    def enrich(self, event: TelemetryEvent) -> EnrichedEvent:
        """
        Build the enriched event for a decoded telemetry payload.

        Args:
            event: Validated telemetry event

        Returns:
            Enriched event with deviceName and metrics passed through

        Raises:
            MalformedTimestamp: If messageTime is not a valid instant
        """
        civil = to_civil(event.messageTime, self.tz)

        # datetime only represents years 1..9999; pad to four digits
        year = f"{civil.year:04d}"
        month = f"{civil.month:02d}"
        day = f"{civil.day:02d}"

        return EnrichedEvent(
            deviceName=event.deviceName,
            metrics=event.metrics,
            date=f"{year}/{month}/{day}",
            hour=f"{civil.hour:02d}",
            minute=f"{civil.minute:02d}",
            second=f"{civil.second:02d}",
        )


def derive_partition_key(event: EnrichedEvent) -> PartitionKey:
    """Project the (deviceName, date) partition key from an enriched event."""
    return PartitionKey(deviceName=event.deviceName, date=event.date)
