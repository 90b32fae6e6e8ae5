"""Tests for DestinationService batch fetch and refresh."""

import random
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from gomate.adapters.transport_api import TransportApiError
from gomate.application.errors import StationSearchError
from gomate.application.services import DestinationBuilder, DestinationService
from gomate.domain.models import Connection, Departure, Destination, Station, StationboardEntry

ZURICH = ZoneInfo("Europe/Zurich")
NOW = datetime(2024, 1, 15, 12, 0, tzinfo=ZURICH)


class MockTransportRepository:
    """Mock transport repository for testing."""

    def __init__(
        self,
        stations: dict[str, list[Station]] | None = None,
        boards: dict[str, list[StationboardEntry]] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        """Initialize with canned stations and boards per query."""
        self.stations = stations or {}
        self.boards = boards or {}
        self.failing = failing or set()
        self.stationboard_calls: list[tuple[str, int]] = []

    async def search_stations(self, query: str) -> list[Station]:
        if query in self.failing:
            raise TransportApiError(f"Got response (500) for {query}", status_code=500)
        return self.stations.get(query, [Station(id=query, name=query)])

    async def get_stationboard(self, station_name: str, limit: int) -> list[StationboardEntry]:
        self.stationboard_calls.append((station_name, limit))
        if station_name in self.failing:
            raise TransportApiError(f"Got response (500) for {station_name}", status_code=500)
        return self.boards.get(station_name, [])

    async def get_connections(
        self,
        from_station: str,  # noqa: ARG002
        to_station: str,  # noqa: ARG002
        limit: int,  # noqa: ARG002
    ) -> list[Connection]:
        return []


def _entry(moment: datetime | None, category: str = "IC", to: str = "Bern") -> StationboardEntry:
    return StationboardEntry(departure_time=moment, to=to, category=category, number="1")


def _service(
    repo: MockTransportRepository, stations: list[str] | None = None
) -> DestinationService:
    return DestinationService(
        repo,
        DestinationBuilder(tz=ZURICH, rng=random.Random(1)),
        stations or ["Zurich HB", "Geneva", "Basel SBB"],
        tz=ZURICH,
        now=lambda: NOW,
    )


class TestFetchDestinations:
    """Tests for DestinationService.fetch_destinations."""

    @pytest.mark.asyncio
    async def test_when_query_blank_then_default_stations_in_order(self) -> None:
        """Given a blank query, when fetching, then one destination per default station."""
        repo = MockTransportRepository()
        service = _service(repo)

        destinations = await service.fetch_destinations("  ")

        assert [d.name for d in destinations] == ["Zurich HB", "Geneva", "Basel SBB"]
        assert [d.id for d in destinations] == [1, 2, 3]
        assert all(limit == 40 for _, limit in repo.stationboard_calls)

    @pytest.mark.asyncio
    async def test_when_one_station_fails_then_batch_keeps_all_records(self) -> None:
        """Given a batch of 3 where one throws, when fetching, then 3 records with one fallback."""
        repo = MockTransportRepository(
            boards={"Zurich HB": [_entry(NOW)], "Basel SBB": [_entry(NOW, "S")]},
            failing={"Geneva"},
        )
        service = _service(repo)

        destinations = await service.fetch_destinations("")

        assert len(destinations) == 3
        fallback = destinations[1]
        assert fallback.name == "Geneva"
        assert fallback.rating == 4.2
        assert fallback.schedule == "08:00, 10:00, 14:00, 18:00"
        assert fallback.price == 20
        assert destinations[0].transport_type == "Express"
        assert destinations[2].transport_type == "S-Bahn"

    @pytest.mark.asyncio
    async def test_when_location_lookup_empty_then_fallback(self) -> None:
        """Given a station the location search cannot find, when fetching, then fallback."""
        repo = MockTransportRepository(stations={"Geneva": []})
        service = _service(repo)

        destinations = await service.fetch_destinations("")

        assert destinations[1].description == (
            "Transport hub in Geneva, Switzerland with regular services."
        )

    @pytest.mark.asyncio
    async def test_when_searching_zurich_then_name_and_location_from_match(self) -> None:
        """Given "Zurich" finds "Zürich HB", when fetching, then name and location use it."""
        zurich_hb = Station(id="8503000", name="Zürich HB")
        repo = MockTransportRepository(
            stations={"Zurich": [zurich_hb], "Zürich HB": [zurich_hb]},
            boards={"Zürich HB": [_entry(NOW + timedelta(minutes=5))]},
        )
        service = _service(repo)

        destinations = await service.fetch_destinations("Zurich")

        assert len(destinations) == 1
        assert destinations[0].name == "Zürich HB"
        assert destinations[0].location == "Zürich, Switzerland"
        assert destinations[0].schedule == "12:05"

    @pytest.mark.asyncio
    async def test_when_search_has_many_matches_then_limited(self) -> None:
        """Given 20 matches, when fetching, then only the first 15 stations are used."""
        matches = [Station(id=str(i), name=f"Station {i}") for i in range(20)]
        repo = MockTransportRepository(stations={"Station": matches})
        service = _service(repo)

        destinations = await service.fetch_destinations("Station")

        assert len(destinations) == 15
        assert destinations[-1].name == "Station 14"

    @pytest.mark.asyncio
    async def test_when_search_finds_nothing_then_raises(self) -> None:
        """Given a query with no station, when fetching, then StationSearchError is raised."""
        repo = MockTransportRepository(stations={"Atlantis": []})
        service = _service(repo)

        with pytest.raises(StationSearchError, match="No stations found"):
            await service.fetch_destinations("Atlantis")

    @pytest.mark.asyncio
    async def test_when_search_request_fails_then_error_propagates(self) -> None:
        """Given the search request itself fails, when fetching, then the error propagates."""
        repo = MockTransportRepository(failing={"Bern"})
        service = _service(repo)

        with pytest.raises(TransportApiError):
            await service.fetch_destinations("Bern")


class TestRefreshDestination:
    """Tests for DestinationService.refresh_destination."""

    def _existing(self, departures: list[Departure] | None = None) -> Destination:
        departures = departures or []
        return Destination(
            id=3,
            name="Bern",
            schedule=", ".join(d.time for d in departures) or "old schedule",
            departures=departures,
        )

    @pytest.mark.asyncio
    async def test_when_departures_left_today_then_only_those_kept(self) -> None:
        """Given past, future and tomorrow entries, when refreshing, then only upcoming today."""
        repo = MockTransportRepository(
            boards={
                "Bern": [
                    _entry(NOW - timedelta(minutes=10), to="Past"),
                    _entry(NOW, to="Now"),
                    _entry(NOW + timedelta(hours=3), to="Later"),
                    _entry(None, to="Broken"),
                    _entry(NOW + timedelta(days=1), to="Tomorrow"),
                ]
            }
        )
        service = _service(repo)

        refreshed = await service.refresh_destination(self._existing())

        assert [d.destination for d in refreshed.departures] == ["Now", "Later"]
        assert refreshed.schedule == "12:00, 15:00"
        assert refreshed.id == 3
        assert repo.stationboard_calls == [("Bern", 100)]

    @pytest.mark.asyncio
    async def test_when_nothing_left_today_then_cached_departures_kept(self) -> None:
        """Given no remaining departures and cached ones, when refreshing, then cached are kept."""
        cached = [Departure(time="09:00", destination="Thun"), Departure(time="10:00")]
        repo = MockTransportRepository(
            boards={"Bern": [_entry(NOW - timedelta(hours=1), to="Past")]}
        )
        service = _service(repo)

        refreshed = await service.refresh_destination(self._existing(cached))

        assert refreshed.departures == cached
        assert refreshed.schedule == "09:00, 10:00"

    @pytest.mark.asyncio
    async def test_when_nothing_left_and_no_cache_then_unfiltered_entries(self) -> None:
        """Given no remaining departures and no cache, when refreshing, then first 40 unfiltered."""
        board = [_entry(NOW - timedelta(minutes=i + 1)) for i in range(50)]
        repo = MockTransportRepository(boards={"Bern": board})
        service = _service(repo)

        refreshed = await service.refresh_destination(self._existing())

        assert len(refreshed.departures) == 40
        assert refreshed.departures[0].time == "11:59"

    @pytest.mark.asyncio
    async def test_when_board_empty_and_no_cache_then_old_schedule(self) -> None:
        """Given an empty board and no cache, when refreshing, then the old schedule stays."""
        service = _service(MockTransportRepository())

        refreshed = await service.refresh_destination(self._existing())

        assert refreshed.departures == []
        assert refreshed.schedule == "old schedule"

    @pytest.mark.asyncio
    async def test_when_request_fails_then_existing_returned(self) -> None:
        """Given a failing stationboard request, when refreshing, then existing is returned."""
        existing = self._existing([Departure(time="09:00")])
        service = _service(MockTransportRepository(failing={"Bern"}))

        refreshed = await service.refresh_destination(existing)

        assert refreshed is existing
