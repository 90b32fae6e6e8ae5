"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """A station as returned by the location search."""

    id: str
    name: str
    x: float | None = None  # Longitude-like coordinate from the upstream API
    y: float | None = None  # Latitude-like coordinate from the upstream API
