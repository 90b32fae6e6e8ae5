"""Transport repository adapter backed by transport.opendata.ch."""

import logging
from datetime import tzinfo
from typing import TYPE_CHECKING

from gomate.adapters.transport_api.connection_parser import ConnectionParser
from gomate.adapters.transport_api.constants import TRANSPORT_API_BASE_URL
from gomate.adapters.transport_api.http_client import TransportHttpClient
from gomate.adapters.transport_api.stationboard_parser import StationboardParser
from gomate.domain.models.connection import Connection
from gomate.domain.models.station import Station
from gomate.domain.models.stationboard_entry import StationboardEntry
from gomate.domain.ports.transport_repository import TransportRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class OpenDataTransportRepository(TransportRepository):
    """Adapter for the Swiss public-transport open-data API."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = TRANSPORT_API_BASE_URL,
        timeout_seconds: float = 10,
        tz: tzinfo | None = None,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API base URL.
            timeout_seconds: Total timeout per request.
            tz: Timezone used when formatting connection times.
        """
        self._http_client = TransportHttpClient(
            session=session, base_url=base_url, timeout_seconds=timeout_seconds
        )
        self._connection_parser = ConnectionParser(tz=tz)

    async def search_stations(self, query: str) -> list[Station]:
        """Find stations matching a query, best match first."""
        locations = await self._http_client.fetch_locations(query)
        stations = StationboardParser.parse_stations(locations)
        logger.debug(f"Location search '{query}' returned {len(stations)} station(s)")
        return stations

    async def get_stationboard(self, station_name: str, limit: int) -> list[StationboardEntry]:
        """Get the departure board for a station in upstream order."""
        rows = await self._http_client.fetch_stationboard(station_name, limit)
        return StationboardParser.parse_stationboard(rows)

    async def get_connections(
        self, from_station: str, to_station: str, limit: int
    ) -> list[Connection]:
        """Get connections between two stations."""
        rows = await self._http_client.fetch_connections(from_station, to_station, limit)
        return self._connection_parser.parse_connections(rows)
