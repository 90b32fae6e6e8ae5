"""Transport repository port."""

from typing import Protocol

from gomate.domain.models.connection import Connection
from gomate.domain.models.station import Station
from gomate.domain.models.stationboard_entry import StationboardEntry


class TransportRepository(Protocol):
    """Port for the public-transport data source."""

    async def search_stations(self, query: str) -> list[Station]:
        """Find stations matching a free-text query, best match first."""
        ...

    async def get_stationboard(self, station_name: str, limit: int) -> list[StationboardEntry]:
        """Get upcoming departures for a station in upstream (chronological) order."""
        ...

    async def get_connections(
        self, from_station: str, to_station: str, limit: int
    ) -> list[Connection]:
        """Get point-to-point connections between two stations."""
        ...
