"""Destination browser service: batch fetch and refresh by id."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING

from gomate.application.errors import StationSearchError
from gomate.application.services.destination_builder import DestinationBuilder, schedule_for

if TYPE_CHECKING:
    from gomate.domain.models.departure import Departure
    from gomate.domain.models.destination import Destination
    from gomate.domain.models.stationboard_entry import StationboardEntry
    from gomate.domain.ports import TransportRepository

logger = logging.getLogger(__name__)


class DestinationService:
    """Builds the destination list from the transport API."""

    def __init__(
        self,
        transport_repository: TransportRepository,
        builder: DestinationBuilder,
        default_stations: Sequence[str],
        *,
        search_result_limit: int = 15,
        stationboard_limit: int = 40,
        refresh_stationboard_limit: int = 100,
        refresh_fallback_limit: int = 40,
        tz: tzinfo | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            transport_repository: Source of stations and stationboards.
            builder: Maps typed upstream data to Destination records.
            default_stations: Stations shown when the search query is blank.
            search_result_limit: Maximum stations taken from a search.
            stationboard_limit: Departures fetched per station in a batch.
            refresh_stationboard_limit: Departures fetched when refreshing one station.
            refresh_fallback_limit: Unfiltered departures kept when nothing is left today.
            tz: Timezone defining "today" for the refresh filter.
            now: Clock, injectable for tests.
        """
        self._transport_repository = transport_repository
        self._builder = builder
        self._default_stations = list(default_stations)
        self._search_result_limit = search_result_limit
        self._stationboard_limit = stationboard_limit
        self._refresh_stationboard_limit = refresh_stationboard_limit
        self._refresh_fallback_limit = refresh_fallback_limit
        self._tz = tz
        self._now = now or (lambda: datetime.now(self._tz).astimezone(self._tz))

    async def resolve_station_names(self, query: str = "") -> list[str]:
        """Resolve the station names to show for a search query.

        A blank query gives the default station list.

        Raises:
            StationSearchError: If the search matched no station.
        """
        if not query.strip():
            return list(self._default_stations)

        stations = await self._transport_repository.search_stations(query.strip())
        names = [station.name for station in stations if station.name]
        if not names:
            raise StationSearchError("No stations found")
        return names[: self._search_result_limit]

    async def fetch_destinations(self, query: str = "") -> list[Destination]:
        """Fetch one Destination per resolved station, in station order.

        A failure for one station yields its fallback record and never
        aborts the batch.
        """
        station_names = await self.resolve_station_names(query)
        logger.info(f"Fetching {len(station_names)} destination(s) for query {query!r}")

        return list(
            await asyncio.gather(
                *(
                    self._enrich_station(station_name, index)
                    for index, station_name in enumerate(station_names)
                )
            )
        )

    async def _enrich_station(self, station_name: str, index: int) -> Destination:
        """Fetch location and stationboard for one station."""
        try:
            stations = await self._transport_repository.search_stations(station_name)
            if not stations:
                raise StationSearchError(f"Station not found: {station_name}")
            entries = await self._transport_repository.get_stationboard(
                station_name, self._stationboard_limit
            )
            destination = self._builder.build(station_name, index, stations[0], entries)
            logger.debug(f"Built destination {station_name} with {len(entries)} departures")
            return destination
        except Exception as e:
            logger.warning(f"Using fallback destination for {station_name}: {e}")
            return self._builder.build_fallback(station_name, index)

    async def refresh_destination(self, existing: Destination) -> Destination:
        """Reload the remaining departures of today for an already loaded destination.

        Falls back to the cached departures, then to the first unfiltered
        departures. An upstream failure returns ``existing`` unchanged.
        """
        try:
            entries = await self._transport_repository.get_stationboard(
                existing.name, self._refresh_stationboard_limit
            )
        except Exception as e:
            logger.warning(f"Could not refresh destination {existing.id} ({existing.name}): {e}")
            return existing

        departures = self._remaining_today(entries)
        if not departures:
            if existing.departures:
                departures = list(existing.departures)
            elif entries:
                departures = [
                    self._builder.to_departure(entry)
                    for entry in entries[: self._refresh_fallback_limit]
                ]

        schedule = schedule_for(departures) if departures else existing.schedule
        logger.info(f"Refreshed destination {existing.id} with {len(departures)} departures")
        return existing.model_copy(update={"departures": departures, "schedule": schedule})

    def _remaining_today(self, entries: list[StationboardEntry]) -> list[Departure]:
        """Keep departures that are today and not in the past."""
        now = self._now()
        today = now.astimezone(self._tz).date()
        remaining = []
        for entry in entries:
            departure_time = entry.departure_time
            if departure_time is None:
                continue
            if departure_time.tzinfo is None:
                departure_time = departure_time.replace(tzinfo=now.tzinfo)
            local_time = departure_time.astimezone(self._tz)
            if local_time.date() == today and local_time >= now:
                remaining.append(self._builder.to_departure(entry))
        return remaining
