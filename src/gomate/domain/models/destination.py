"""Destination domain model."""

from pydantic import BaseModel, ConfigDict, Field

from gomate.domain.models.departure import Departure


class Destination(BaseModel):
    """A station presented in the destination browser.

    Serialized with camelCase aliases so persisted favorites keep the same
    shape as the JSON written by earlier app versions.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    description: str = ""
    image: str = ""
    location: str = "Switzerland"
    status: str = "Operating"
    rating: float = 4.2  # Cosmetic placeholder, not a real rating
    category: str = "Transport"
    price: float | None = None  # Cosmetic placeholder, not a real fare
    schedule: str | None = None
    transport_type: str | None = Field(default=None, alias="transportType")
    departures: list[Departure] = Field(default_factory=list)
