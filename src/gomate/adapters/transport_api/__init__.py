"""Swiss public-transport open-data API adapter."""

from gomate.adapters.transport_api.connection_parser import ConnectionParser
from gomate.adapters.transport_api.http_client import TransportApiError, TransportHttpClient
from gomate.adapters.transport_api.opendata_transport_repository import (
    OpenDataTransportRepository,
)
from gomate.adapters.transport_api.stationboard_parser import StationboardParser

__all__ = [
    "ConnectionParser",
    "OpenDataTransportRepository",
    "StationboardParser",
    "TransportApiError",
    "TransportHttpClient",
]
