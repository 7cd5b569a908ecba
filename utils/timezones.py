"""
Timezone Resolution Utilities

Turns the configured timezone identifier into a tzinfo once at startup.

Accepted forms:
- "UTC", "Z"
- fixed offsets: "+09:00", "-0530", "+9", "UTC+9", "UTC-03:30", "GMT+01:00"
- IANA zone names: "Asia/Tokyo", "Europe/Madrid"
"""

import logging
import re
from datetime import timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(
    r"^(?:UTC|GMT)?\s*(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)

_UTC_ALIASES = {"utc", "z", "gmt", "etc/utc", "etc/gmt"}


class ConfigurationError(ValueError):
    """Raised when process-wide configuration cannot be resolved."""


def parse_offset(value: str) -> timezone | None:
    """
    Parse a fixed UTC offset identifier.

    Args:
        value: Identifier such as "+09:00" or "UTC-3"

    Returns:
        Fixed-offset timezone, or None if value is not an offset

    Raises:
        ConfigurationError: If the offset is out of range
    """
    match = _OFFSET_RE.match(value.strip())
    if match is None:
        return None

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes") or 0)
    if hours > 23 or minutes > 59:
        raise ConfigurationError(f"Timezone offset out of range: {value}")

    delta = timedelta(hours=hours, minutes=minutes)
    if match.group("sign") == "-":
        delta = -delta

    return timezone(delta)


def resolve_timezone(value: str) -> tzinfo:
    """
    Resolve a timezone identifier into a tzinfo instance.

    Args:
        value: Configured timezone identifier

    Returns:
        tzinfo usable with datetime.astimezone

    Raises:
        ConfigurationError: If the identifier is empty or unknown
    """
    name = (value or "").strip()
    if not name:
        raise ConfigurationError("Timezone identifier is empty")

    if name.lower() in _UTC_ALIASES:
        return timezone.utc

    offset = parse_offset(name)
    if offset is not None:
        return offset

    try:
        zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.error("Unknown timezone identifier: %s", name)
        raise ConfigurationError(f"Unknown timezone identifier: {name}") from e

    return zone
