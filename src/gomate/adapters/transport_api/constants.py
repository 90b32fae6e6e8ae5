"""Constants for the Swiss public-transport open-data API adapter.

API Documentation: https://transport.opendata.ch/docs.html
No authentication required.
"""

TRANSPORT_API_BASE_URL = "https://transport.opendata.ch"
LOCATIONS_PATH = "/v1/locations"  # GET /v1/locations?query=...&type=station
STATIONBOARD_PATH = "/v1/stationboard"  # GET /v1/stationboard?station=...&limit=...
CONNECTIONS_PATH = "/v1/connections"  # GET /v1/connections?from=...&to=...&limit=...

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
