"""Builds Destination view-models from typed stationboard data."""

import logging
import random
from datetime import tzinfo

from gomate.domain.formatters import classify_transport_type, format_clock_time
from gomate.domain.formatters.time_formatter import UNKNOWN_TIME
from gomate.domain.formatters.train_category import DEFAULT_TRANSPORT_TYPE
from gomate.domain.models.departure import Departure
from gomate.domain.models.destination import Destination
from gomate.domain.models.station import Station
from gomate.domain.models.stationboard_entry import StationboardEntry

logger = logging.getLogger(__name__)

EMPTY_BOARD_SCHEDULE = "08:00, 10:00, 14:00, 18:00, 20:00, 22:00"
FALLBACK_TIMES = ("08:00", "10:00", "14:00", "18:00")
FALLBACK_RATING = 4.2
DEFAULT_STATUS = "Operating"
DEFAULT_CATEGORY = "Transport"
COUNTRY = "Switzerland"

DESCRIPTION_TEMPLATES = (
    "Major transport hub connecting all of Switzerland with frequent {transport_type} services.",
    "Beautiful station offering scenic routes throughout the Swiss Alps.",
    "Modern transport center with connections to major European cities.",
    "Historic station serving as gateway to stunning mountain destinations.",
    "Central hub providing excellent connectivity across Switzerland.",
)

# Trailing words that name the station rather than the town ("Zürich HB", "Basel SBB")
STATION_DESIGNATORS = frozenset({"HB", "SBB", "CFF", "FFS", "HBF", "BAHNHOF", "GARE", "STAZIONE"})

_UNSPLASH = "https://images.unsplash.com"
DEFAULT_IMAGE = f"{_UNSPLASH}/photo-1464037866556-6812c9d1c72e?w=800&h=600&fit=crop"
STATION_IMAGES: dict[str, str] = {
    "Zurich HB": f"{_UNSPLASH}/photo-1604212399401-5fd807a65e18?fm=jpg&q=60&w=3000",
    "Zurich": f"{_UNSPLASH}/photo-1604212399401-5fd807a65e18?fm=jpg&q=60&w=3000",
    "Geneva": f"{_UNSPLASH}/photo-1660810535332-7ecba72ed873?fm=jpg&q=60&w=3000",
    "Basel SBB": f"{_UNSPLASH}/photo-1527839321757-ad3a2f2be351?fm=jpg&q=60&w=3000",
    "Basel": f"{_UNSPLASH}/photo-1449824913935-59a10b8d2000?w=800&h=600&fit=crop",
    "Bern": f"{_UNSPLASH}/photo-1527295110-5145f6b148d0?fm=jpg&q=60&w=3000",
    "Lausanne": f"{_UNSPLASH}/photo-1523731407965-2430cd12f5e4?w=800&h=600&fit=crop",
    "Lucerne": f"{_UNSPLASH}/photo-1514970746-d4a465d514d0?fm=jpg&q=60&w=3000",
    "Lugano": f"{_UNSPLASH}/photo-1572041341933-57caa3b8f6d5?fm=jpg&q=60&w=3000",
    "St. Gallen": f"{_UNSPLASH}/photo-1465447142348-e9952c393450?w=800&h=600&fit=crop",
    "Winterthur": f"{_UNSPLASH}/photo-1480714378408-67cf0d13bc1b?w=800&h=600&fit=crop",
    "Biel/Bienne": f"{_UNSPLASH}/photo-1472214103451-9374bd1c798e?w=800&h=600&fit=crop",
    "Thun": f"{_UNSPLASH}/photo-1622670719955-4e1c43db73ef?fm=jpg&q=60&w=3000",
    "Köniz": f"{_UNSPLASH}/photo-1593186344142-ef775a6e596f?fm=jpg&q=60&w=3000",
    "La Chaux-de-Fonds": f"{_UNSPLASH}/photo-1464822759023-fed622ff2c3b?w=800&h=600&fit=crop",
    "Schaffhausen": f"{_UNSPLASH}/photo-1563196314-2f7f1facf557?fm=jpg&q=60&w=3000",
    "Fribourg": f"{_UNSPLASH}/photo-1506905925346-21bda4d32df4?w=800&h=600&fit=crop",
    "Interlaken": f"{_UNSPLASH}/photo-1439066615861-d1af74d74000?w=800&h=600&fit=crop",
    "Zermatt": f"{_UNSPLASH}/photo-1574499307074-f9a427d03a45?fm=jpg&q=60&w=3000",
    "Montreux": f"{_UNSPLASH}/photo-1418065460487-3e41a6c84dc5?w=800&h=600&fit=crop",
    "Grindelwald": f"{_UNSPLASH}/photo-1572803090936-72796aef96a2?fm=jpg&q=60&w=3000",
    "Davos": f"{_UNSPLASH}/photo-1672498821497-deee7c266a69?fm=jpg&q=60&w=3000",
    "Locarno": f"{_UNSPLASH}/photo-1476514525535-07fb3b4ae5f1?w=800&h=600&fit=crop",
}


def schedule_for(departures: list[Departure]) -> str:
    """Join departure times as "HH:MM, HH:MM, ..."."""
    return ", ".join(departure.time for departure in departures)


def price_for(index: int) -> float:
    """Cosmetic price derived from the position in the batch."""
    return float(15 + index * 5)


class DestinationBuilder:
    """Turns a station plus its stationboard into a Destination.

    Pure apart from the rating, which is drawn from the injected random
    generator.
    """

    def __init__(self, tz: tzinfo | None = None, rng: random.Random | None = None) -> None:
        """Initialize the builder.

        Args:
            tz: Timezone for departure times. None uses the system zone.
            rng: Random generator for the cosmetic rating.
        """
        self._tz = tz
        self._rng = rng or random.Random()

    def to_departure(self, entry: StationboardEntry) -> Departure:
        """Map a stationboard row to a Departure, filling upstream gaps with defaults."""
        return Departure(
            time=format_clock_time(entry.departure_time, self._tz) or UNKNOWN_TIME,
            destination=entry.to or "Unknown",
            category=entry.category or "Train",
            number=entry.number or "",
            platform=entry.platform or "N/A",
        )

    def build(
        self,
        station_name: str,
        index: int,
        station: Station,
        entries: list[StationboardEntry],
    ) -> Destination:
        """Build the Destination for the station at ``index`` of the requested batch.

        Args:
            station_name: Station name as requested (used for image and location).
            index: Zero-based position in the requested batch.
            station: Best location-search match for the requested name.
            entries: Stationboard rows in upstream order.
        """
        departures = [self.to_departure(entry) for entry in entries]
        schedule = schedule_for(departures) if departures else EMPTY_BOARD_SCHEDULE
        transport_type = classify_transport_type(entries[0].category if entries else None)

        return Destination(
            id=index + 1,
            name=station.name or station_name,
            description=self.describe(index, transport_type),
            image=STATION_IMAGES.get(station_name, DEFAULT_IMAGE),
            location=self.build_location(station_name, station),
            status=DEFAULT_STATUS,
            rating=4.0 + self._rng.random(),
            category=DEFAULT_CATEGORY,
            price=price_for(index),
            schedule=schedule,
            transport_type=transport_type,
            departures=departures,
        )

    def build_fallback(self, station_name: str, index: int) -> Destination:
        """Build the placeholder used when live data for a station is unavailable."""
        departures = [Departure(time=time) for time in FALLBACK_TIMES]
        return Destination(
            id=index + 1,
            name=station_name,
            description=f"Transport hub in {station_name}, {COUNTRY} with regular services.",
            image=STATION_IMAGES.get(station_name, DEFAULT_IMAGE),
            location=COUNTRY,
            status=DEFAULT_STATUS,
            rating=FALLBACK_RATING,
            category=DEFAULT_CATEGORY,
            price=price_for(index),
            schedule=schedule_for(departures),
            transport_type=DEFAULT_TRANSPORT_TYPE,
            departures=departures,
        )

    @staticmethod
    def describe(index: int, transport_type: str) -> str:
        """Pick the description template for a batch position."""
        template = DESCRIPTION_TEMPLATES[index % len(DESCRIPTION_TEMPLATES)]
        return template.format(transport_type=transport_type)

    @staticmethod
    def build_location(station_name: str, station: Station | None = None) -> str:
        """Derive "<city>, Switzerland" from a station name.

        The city is the part before the first comma without trailing station
        designators, so "Zürich HB" gives "Zürich, Switzerland". Without a name
        the upstream coordinates are shown, and without those just the country.
        """
        city = DestinationBuilder.city_name(station_name)
        if city:
            return f"{city}, {COUNTRY}"
        if station is not None and station.x and station.y:
            return f"{station.y:.4f}°N, {station.x:.4f}°E"
        return COUNTRY

    @staticmethod
    def city_name(station_name: str) -> str:
        """Extract the town part of a station name."""
        words = station_name.split(",", 1)[0].split()
        while len(words) > 1 and words[-1].upper() in STATION_DESIGNATORS:
            words.pop()
        return " ".join(words)
