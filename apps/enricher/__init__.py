"""
Enricher App - Firehose Record Transformation

Responsibilities:
- Decode base64 JSON telemetry records delivered by the buffering pipeline
- Add calendar fields (date, hour, minute, second) in the configured timezone
- Derive dynamic partition keys (deviceName, date)
- Re-encode records as JSON lines (one record per line, trailing newline)
- Report per-record failures as ProcessingFailed without aborting the batch

Outputs:
- Response records: {recordId, result, data, metadata.partitionKeys}
"""
