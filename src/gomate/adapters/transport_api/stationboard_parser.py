"""Parser for transport.opendata.ch location and stationboard responses."""

import logging
from typing import Any

from gomate.domain.formatters import parse_timestamp
from gomate.domain.models.station import Station
from gomate.domain.models.stationboard_entry import StationboardEntry

logger = logging.getLogger(__name__)


class StationboardParser:
    """Parses raw location and stationboard objects into typed records."""

    @staticmethod
    def parse_stations(stations: list[dict[str, Any]]) -> list[Station]:
        """Parse stations from a location search, keeping upstream order.

        Args:
            stations: Raw station objects from the ``stations`` field.

        Returns:
            List of Station objects; entries without a name are skipped.
        """
        results = []
        for raw in stations:
            name = raw.get("name")
            if not name:
                logger.debug(f"Skipping location without name: {raw.get('id')}")
                continue

            coordinate = raw.get("coordinate") or {}
            results.append(
                Station(
                    id=str(raw.get("id") or ""),
                    name=str(name),
                    x=StationboardParser._parse_coordinate(coordinate.get("x")),
                    y=StationboardParser._parse_coordinate(coordinate.get("y")),
                )
            )
        return results

    @staticmethod
    def parse_stationboard(stationboard: list[dict[str, Any]]) -> list[StationboardEntry]:
        """Parse stationboard rows without reordering them.

        Args:
            stationboard: Raw departure objects from the ``stationboard`` field.

        Returns:
            One StationboardEntry per row, in upstream order.
        """
        return [StationboardParser._parse_entry(raw) for raw in stationboard]

    @staticmethod
    def _parse_entry(raw: dict[str, Any]) -> StationboardEntry:
        """Parse a single stationboard row."""
        stop = raw.get("stop") or {}
        return StationboardEntry(
            departure_time=parse_timestamp(stop.get("departure")),
            to=StationboardParser._optional_str(raw.get("to")),
            category=StationboardParser._optional_str(raw.get("category")),
            number=StationboardParser._optional_str(raw.get("number")),
            platform=StationboardParser._optional_str(stop.get("platform")),
        )

    @staticmethod
    def _optional_str(value: Any) -> str | None:
        """Convert a scalar to str, mapping None and empty strings to None."""
        if value is None or value == "":
            return None
        return str(value)

    @staticmethod
    def _parse_coordinate(value: Any) -> float | None:
        """Parse a coordinate value to float."""
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None
