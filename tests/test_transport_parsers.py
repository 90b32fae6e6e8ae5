"""Tests for stationboard and connection parsing."""

from datetime import datetime, timedelta, timezone
from typing import Any
from zoneinfo import ZoneInfo

from gomate.adapters.transport_api import ConnectionParser, StationboardParser

ZURICH = ZoneInfo("Europe/Zurich")


def _stationboard_row(
    departure: str | None = "2024-01-15T08:07:00+0100",
    to: str | None = "Bern",
    category: str | None = "IC",
    number: str | None = "8",
    platform: str | None = "31",
) -> dict[str, Any]:
    return {
        "stop": {"departure": departure, "platform": platform},
        "to": to,
        "category": category,
        "number": number,
    }


class TestParseStations:
    """Tests for StationboardParser.parse_stations."""

    def test_when_locations_given_then_stations_in_upstream_order(self) -> None:
        """Given two locations, when parsing, then both are returned in order with coordinates."""
        locations = [
            {"id": "8503000", "name": "Zürich HB", "coordinate": {"x": 47.3778, "y": 8.5403}},
            {"id": "8503020", "name": "Zürich Hardbrücke", "coordinate": {"x": None, "y": None}},
        ]

        stations = StationboardParser.parse_stations(locations)

        assert [s.name for s in stations] == ["Zürich HB", "Zürich Hardbrücke"]
        assert stations[0].id == "8503000"
        assert stations[0].x == 47.3778
        assert stations[1].x is None

    def test_when_location_has_no_name_then_skipped(self) -> None:
        """Given a location without a name, when parsing, then it is dropped."""
        stations = StationboardParser.parse_stations([{"id": "1", "name": None}, {"id": "2"}])

        assert stations == []


class TestParseStationboard:
    """Tests for StationboardParser.parse_stationboard."""

    def test_when_rows_given_then_entries_keep_order_and_fields(self) -> None:
        """Given stationboard rows, when parsing, then entries keep upstream order."""
        rows = [
            _stationboard_row(departure="2024-01-15T08:07:00+0100", to="Bern"),
            _stationboard_row(departure="2024-01-15T08:02:00+0100", to="Basel SBB"),
        ]

        entries = StationboardParser.parse_stationboard(rows)

        assert [e.to for e in entries] == ["Bern", "Basel SBB"]
        assert entries[0].departure_time == datetime(
            2024, 1, 15, 8, 7, tzinfo=timezone(timedelta(hours=1))
        )
        assert entries[0].category == "IC"
        assert entries[0].number == "8"
        assert entries[0].platform == "31"

    def test_when_fields_missing_then_entry_has_none(self) -> None:
        """Given a row with missing fields, when parsing, then they become None."""
        entries = StationboardParser.parse_stationboard(
            [{"stop": None, "to": "", "category": None, "number": 0}]
        )

        entry = entries[0]
        assert entry.departure_time is None
        assert entry.to is None
        assert entry.category is None
        assert entry.number == "0"
        assert entry.platform is None


class TestConnectionParser:
    """Tests for ConnectionParser."""

    def _connection(self, **overrides: Any) -> dict[str, Any]:
        conn: dict[str, Any] = {
            "from": {
                "station": {"name": "Zürich HB"},
                "departure": "2024-01-15T08:02:00+0100",
                "platform": "33",
            },
            "to": {"station": {"name": "Bern"}, "arrival": "2024-01-15T08:58:00+0100"},
            "duration": "00d00:56:00",
            "transfers": 0,
            "sections": [
                {"journey": {"category": "IC", "number": "8"}},
                {"journey": None, "walk": {"duration": 120}},
                {"journey": {"category": "S", "number": ""}},
            ],
        }
        conn.update(overrides)
        return conn

    def test_when_connection_complete_then_all_fields_normalized(self) -> None:
        """Given a full connection, when parsing, then times, duration and legs are formatted."""
        connection = ConnectionParser(tz=ZURICH).parse_connection(self._connection())

        assert connection.from_station == "Zürich HB"
        assert connection.to_station == "Bern"
        assert connection.departure == "08:02"
        assert connection.arrival == "08:58"
        assert connection.duration == "0h 56m 00s"
        assert connection.platform == "33"
        assert connection.transfers == 0
        assert connection.train_type == "IC 8 → S"
        assert connection.train_number == ""

    def test_when_optional_fields_missing_then_defaults_apply(self) -> None:
        """Given no platform, transfers, duration or sections, when parsing, then defaults."""
        conn = self._connection(duration=None, transfers=None, sections=[])
        conn["from"]["platform"] = None

        connection = ConnectionParser(tz=ZURICH).parse_connection(conn)

        assert connection.platform == "N/A"
        assert connection.transfers == 0
        assert connection.duration == "N/A"
        assert connection.train_type == "Train"

    def test_when_times_unparseable_then_placeholder(self) -> None:
        """Given broken timestamps, when parsing, then the unknown-time placeholder is used."""
        conn = self._connection()
        conn["from"]["departure"] = "soon"
        conn["to"]["arrival"] = None

        connection = ConnectionParser(tz=ZURICH).parse_connection(conn)

        assert connection.departure == "--:--"
        assert connection.arrival == "--:--"

    def test_when_only_walking_sections_then_train(self) -> None:
        """Given sections without journeys, when building the train type, then Train."""
        assert ConnectionParser.build_train_type([{"journey": None}, {}]) == "Train"

    def test_when_parsing_list_then_order_kept(self) -> None:
        """Given two connections, when parsing the list, then order is kept."""
        first = self._connection(transfers=1)
        second = self._connection(transfers=2)

        connections = ConnectionParser(tz=ZURICH).parse_connections([first, second])

        assert [c.transfers for c in connections] == [1, 2]
