"""Formatting of transport API timestamps and durations for display."""

import re
from datetime import datetime, tzinfo

# Shown when an upstream timestamp is missing or unparseable
UNKNOWN_TIME = "--:--"

_DAYS_DURATION_PATTERN = re.compile(r"(\d+)d(\d+):(\d+):(\d+)")
_DURATION_PATTERN = re.compile(r"(\d+):(\d+):(\d+)")
# transport.opendata.ch emits offsets without a colon ("+0100")
_COMPACT_OFFSET_PATTERN = re.compile(r"([+-]\d{2})(\d{2})$")


def format_duration(duration: str) -> str:
    """Format an upstream duration for display.

    ``"01d02:03:04"`` becomes ``"26h 03m 04s"`` (days folded into hours) and
    ``"05:06:07"`` becomes ``"5h 06m 07s"``. Hours are never zero-padded,
    minutes and seconds keep their upstream digits. Any other input is returned
    unchanged.
    """
    match = _DAYS_DURATION_PATTERN.fullmatch(duration)
    if match:
        days, hours, minutes, seconds = match.groups()
        return f"{int(hours) + int(days) * 24}h {minutes}m {seconds}s"

    match = _DURATION_PATTERN.fullmatch(duration)
    if match:
        hours, minutes, seconds = match.groups()
        return f"{int(hours)}h {minutes}m {seconds}s"

    return duration


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None if it is missing or invalid."""
    if not value or not isinstance(value, str):
        return None

    normalized = value.strip().replace("Z", "+00:00")
    normalized = _COMPACT_OFFSET_PATTERN.sub(r"\1:\2", normalized)
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def to_local_time(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert a timestamp to the given zone (system local zone when tz is None).

    Naive timestamps are taken to already be in that zone.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz) if tz is not None else moment
    return moment.astimezone(tz)


def format_clock_time(value: str | datetime | None, tz: tzinfo | None = None) -> str | None:
    """Format a timestamp as zero-padded 24-hour ``HH:MM`` local time."""
    moment = value if isinstance(value, datetime) else parse_timestamp(value)
    if moment is None:
        return None
    return to_local_time(moment, tz).strftime("%H:%M")
