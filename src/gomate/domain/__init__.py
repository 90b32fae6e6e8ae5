"""Domain layer - core models, formatters and ports."""

from gomate.domain.models import (
    Connection,
    Departure,
    Destination,
    Station,
    StationboardEntry,
    User,
)
from gomate.domain.ports import (
    AuthRepository,
    KeyValueStore,
    TransportRepository,
)

__all__ = [
    "AuthRepository",
    "Connection",
    "Departure",
    "Destination",
    "KeyValueStore",
    "Station",
    "StationboardEntry",
    "TransportRepository",
    "User",
]
