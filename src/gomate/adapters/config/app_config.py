"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIONS: tuple[str, ...] = (
    "Zurich HB",
    "Geneva",
    "Basel SBB",
    "Bern",
    "Lausanne",
    "Lucerne",
    "Lugano",
    "St. Gallen",
    "Winterthur",
    "Biel/Bienne",
    "Thun",
    "Köniz",
    "La Chaux-de-Fonds",
    "Schaffhausen",
    "Fribourg",
)

_API_LIMIT_KEYS = (
    "search_result_limit",
    "stationboard_limit",
    "refresh_stationboard_limit",
    "refresh_fallback_limit",
    "connections_limit",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream APIs
    transport_api_base_url: str = Field(
        default="https://transport.opendata.ch",
        description="Base URL of the Swiss public-transport open-data API",
    )
    auth_api_base_url: str = Field(
        default="https://dummyjson.com",
        description="Base URL of the authentication service",
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for upstream API requests in seconds"
    )

    # Fetch limits
    search_result_limit: int = Field(
        default=15, description="Maximum number of stations taken from a search"
    )
    stationboard_limit: int = Field(
        default=40, description="Departures fetched per station when browsing destinations"
    )
    refresh_stationboard_limit: int = Field(
        default=100, description="Departures fetched when refreshing a single destination"
    )
    refresh_fallback_limit: int = Field(
        default=40,
        description="Unfiltered departures shown when nothing is left for today",
    )
    connections_limit: int = Field(
        default=10, description="Maximum number of connections returned by the journey planner"
    )

    # Display
    timezone: str = Field(
        default="Europe/Zurich",
        description="Timezone for departure times (IANA timezone name, e.g., 'Europe/Zurich')",
    )

    # Persistence
    storage_file: str = Field(
        default="~/.gomate/storage.json",
        description="JSON file holding the session, favorites and theme preference",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    # Optional TOML file with the default station list and API limits
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for default stations and API limits",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging levels."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got '{v}'")
        return level

    @property
    def tzinfo(self) -> ZoneInfo:
        """Configured timezone as a tzinfo object."""
        return ZoneInfo(self.timezone)

    @property
    def storage_path(self) -> Path:
        """Storage file path with the user directory expanded."""
        return Path(self.storage_file).expanduser()

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating API limits."""
        if not self.config_file:
            raise ValueError("config_file must be set to load the stations configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api_config = toml_data.get("api", {})
        for key in _API_LIMIT_KEYS:
            if key in api_config:
                setattr(self, key, int(api_config[key]))

        return toml_data

    def get_default_stations(self) -> list[str]:
        """Return the station names browsed when no search query is given.

        Uses ``stations`` from the TOML file when ``config_file`` is set. The
        list may hold plain names or ``[[stations]]`` tables with a ``name`` key.
        """
        if not self.config_file:
            return list(DEFAULT_STATIONS)

        toml_data = self._load_toml_data()
        stations = toml_data.get("stations")
        if stations is None:
            return list(DEFAULT_STATIONS)
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")

        names: list[str] = []
        for entry in stations:
            if isinstance(entry, str):
                name = entry
            elif isinstance(entry, dict) and "name" in entry:
                name = str(entry["name"])
            else:
                raise ValueError(f"Invalid station entry in TOML config: {entry!r}")
            if name.strip():
                names.append(name.strip())

        if not names:
            raise ValueError("TOML config 'stations' must contain at least one station")
        return names
