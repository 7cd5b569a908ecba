"""Unit tests for timezone identifier resolution."""

from datetime import datetime, timedelta, timezone

import pytest

from utils.timezones import ConfigurationError, parse_offset, resolve_timezone


@pytest.mark.parametrize(
    "identifier, offset",
    [
        ("UTC", timedelta(0)),
        ("z", timedelta(0)),
        ("+09:00", timedelta(hours=9)),
        ("+0900", timedelta(hours=9)),
        ("+9", timedelta(hours=9)),
        ("UTC+9", timedelta(hours=9)),
        ("utc-03:30", -timedelta(hours=3, minutes=30)),
        ("GMT+01:00", timedelta(hours=1)),
        ("-0530", -timedelta(hours=5, minutes=30)),
        ("  +09:00  ", timedelta(hours=9)),
    ],
)
def test_fixed_offsets(identifier, offset):
    assert resolve_timezone(identifier).utcoffset(None) == offset


def test_named_zone():
    tz = resolve_timezone("Asia/Tokyo")
    instant = datetime(2025, 1, 1, tzinfo=timezone.utc)

    assert instant.astimezone(tz).utcoffset() == timedelta(hours=9)


@pytest.mark.parametrize("identifier", ["", "   ", "Mars/Olympus_Mons", "+25:00", "+09:75"])
def test_invalid_identifiers(identifier):
    with pytest.raises(ConfigurationError):
        resolve_timezone(identifier)


def test_parse_offset_ignores_names():
    assert parse_offset("Asia/Tokyo") is None
