"""Domain models for GoMate."""

from gomate.domain.models.connection import Connection
from gomate.domain.models.credentials import LoginCredentials, RegistrationRequest
from gomate.domain.models.departure import Departure
from gomate.domain.models.destination import Destination
from gomate.domain.models.error_details import ErrorDetails
from gomate.domain.models.station import Station
from gomate.domain.models.stationboard_entry import StationboardEntry
from gomate.domain.models.user import User

__all__ = [
    "Connection",
    "Departure",
    "Destination",
    "ErrorDetails",
    "LoginCredentials",
    "RegistrationRequest",
    "Station",
    "StationboardEntry",
    "User",
]
