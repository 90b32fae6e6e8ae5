"""Journey planner service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gomate.application.errors import NoConnectionsError, ValidationFailedError

if TYPE_CHECKING:
    from gomate.domain.models.connection import Connection
    from gomate.domain.ports import TransportRepository

logger = logging.getLogger(__name__)

MISSING_STATIONS_MESSAGE = "Please enter both departure and destination stations"
NO_CONNECTIONS_MESSAGE = "No connections found between these stations"


class JourneyPlannerService:
    """Service for point-to-point connection searches."""

    def __init__(self, transport_repository: TransportRepository, limit: int = 10) -> None:
        """Initialize with a transport repository and the number of connections to request."""
        self._transport_repository = transport_repository
        self._limit = limit

    async def search_connections(self, from_station: str, to_station: str) -> list[Connection]:
        """Search connections between two stations.

        Raises:
            ValidationFailedError: If either station is blank.
            NoConnectionsError: If the API returned no connections.
        """
        from_station = from_station.strip()
        to_station = to_station.strip()
        if not from_station or not to_station:
            raise ValidationFailedError(MISSING_STATIONS_MESSAGE)

        connections = await self._transport_repository.get_connections(
            from_station, to_station, self._limit
        )
        if not connections:
            raise NoConnectionsError(NO_CONNECTIONS_MESSAGE)

        logger.info(f"Found {len(connections)} connection(s) from {from_station} to {to_station}")
        return connections
