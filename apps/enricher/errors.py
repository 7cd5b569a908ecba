"""
Per-record error taxonomy.

None of these abort a batch: the transformer turns each into a
ProcessingFailed result for the offending record only.
"""


class RecordError(Exception):
    """Base class for failures confined to a single record."""

    kind = "record_error"


class DecodeError(RecordError):
    """Payload is not valid base64, UTF-8, or a JSON object."""

    kind = "decode_error"


class ValidationError(RecordError):
    """Required field missing or of the wrong type."""

    kind = "validation_error"


class MalformedTimestamp(RecordError):
    """messageTime cannot be converted to a four-digit-year civil date-time."""

    kind = "malformed_timestamp"
