"""Departure domain model."""

from pydantic import BaseModel, ConfigDict


class Departure(BaseModel):
    """A single scheduled departure shown on a destination's board."""

    model_config = ConfigDict(frozen=True)

    time: str  # HH:MM in local time
    destination: str = "Unknown"
    category: str = "Train"  # Raw category code, e.g. "IC", "S", "B"
    number: str = ""
    platform: str = "N/A"
