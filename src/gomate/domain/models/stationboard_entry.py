"""Stationboard entry domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StationboardEntry:
    """One raw stationboard row with the upstream fields typed but not defaulted."""

    departure_time: datetime | None  # None when the upstream timestamp is missing or invalid
    to: str | None = None
    category: str | None = None
    number: str | None = None
    platform: str | None = None
