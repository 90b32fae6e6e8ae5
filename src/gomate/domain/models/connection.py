"""Connection domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Connection:
    """A point-to-point journey returned by the journey planner."""

    from_station: str
    to_station: str
    departure: str  # HH:MM
    arrival: str  # HH:MM
    duration: str  # e.g. "1h 02m 00s"
    platform: str
    transfers: int
    train_type: str  # Legs joined with " → ", e.g. "IC 712 → S 3"
    train_number: str = ""
