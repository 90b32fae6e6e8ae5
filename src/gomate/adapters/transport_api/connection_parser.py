"""Parser for transport.opendata.ch connection responses."""

import logging
from datetime import tzinfo
from typing import Any

from gomate.domain.formatters.time_formatter import (
    UNKNOWN_TIME,
    format_clock_time,
    format_duration,
)
from gomate.domain.formatters.train_category import (
    DEFAULT_TRANSPORT_TYPE,
    TRAIN_TYPE_SEPARATOR,
)
from gomate.domain.models.connection import Connection

logger = logging.getLogger(__name__)


class ConnectionParser:
    """Parses raw connection objects into Connection records."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        """Initialize the parser.

        Args:
            tz: Timezone for departure/arrival times. None uses the system zone.
        """
        self._tz = tz

    def parse_connections(self, connections: list[dict[str, Any]]) -> list[Connection]:
        """Parse connections, keeping upstream order."""
        return [self.parse_connection(conn) for conn in connections]

    def parse_connection(self, conn: dict[str, Any]) -> Connection:
        """Parse a single connection."""
        origin = conn.get("from") or {}
        target = conn.get("to") or {}

        return Connection(
            from_station=self._station_name(origin),
            to_station=self._station_name(target),
            departure=format_clock_time(origin.get("departure"), self._tz) or UNKNOWN_TIME,
            arrival=format_clock_time(target.get("arrival"), self._tz) or UNKNOWN_TIME,
            duration=format_duration(conn.get("duration") or "N/A"),
            platform=str(origin.get("platform") or "N/A"),
            transfers=int(conn.get("transfers") or 0),
            train_type=self.build_train_type(conn.get("sections") or []),
            train_number="",
        )

    @staticmethod
    def build_train_type(sections: list[dict[str, Any]]) -> str:
        """Join the vehicle legs of a connection as "IC 712 → S 3".

        Walking sections (no ``journey``) are skipped. Without any vehicle leg
        the result is "Train".
        """
        legs = []
        for section in sections:
            journey = section.get("journey") if isinstance(section, dict) else None
            if not journey:
                continue
            category = str(journey.get("category") or "")
            number = str(journey.get("number") or "")
            leg = f"{category} {number}" if number else category
            if leg:
                legs.append(leg)

        if not legs:
            logger.debug(f"No vehicle leg in {len(sections)} section(s), using default type")
            return DEFAULT_TRANSPORT_TYPE
        return TRAIN_TYPE_SEPARATOR.join(legs)

    @staticmethod
    def _station_name(endpoint: dict[str, Any]) -> str:
        """Extract the station name of a connection endpoint."""
        station = endpoint.get("station") or {}
        return str(station.get("name") or "")
