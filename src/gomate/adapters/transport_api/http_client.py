"""HTTP client for the Swiss public-transport open-data API.

API Documentation: https://transport.opendata.ch/docs.html
"""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from gomate.adapters.api_request_logger import log_api_request
from gomate.adapters.transport_api.constants import (
    CONNECTIONS_PATH,
    DEFAULT_HEADERS,
    LOCATIONS_PATH,
    STATIONBOARD_PATH,
    TRANSPORT_API_BASE_URL,
)
from gomate.domain.exceptions import UpstreamApiError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class TransportApiError(UpstreamApiError):
    """A transport API request failed or returned an unusable response."""


class TransportHttpClient:
    """HTTP client for transport.opendata.ch returning raw JSON payloads."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = TRANSPORT_API_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API base URL without trailing slash.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _raise_for_response(self, response: "ClientResponse", url: str) -> None:
        """Raise TransportApiError with status, body excerpt and the upstream message."""
        try:
            data = await response.json(content_type=None)
        except ValueError:
            data = None

        message = data.get("message") if isinstance(data, dict) else None
        if data is not None:
            body = json.dumps(data, ensure_ascii=False)[:200]
        else:
            response_text = await response.text()
            body = response_text[:200] if response_text else "(empty response body)"
        raise TransportApiError(
            f"Got response ({response.status}) from {url}: {body}",
            status_code=response.status,
            upstream_message=str(message) if message else None,
        )

    async def _get_json(self, path: str, params: dict[str, str | int]) -> dict[str, Any]:
        """GET a path and return the decoded JSON object."""
        if not self._session:
            raise RuntimeError("Transport API requires an aiohttp session")

        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    await self._raise_for_response(response, url)
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportApiError(f"Request to {url} failed: {e}") from e

        if not isinstance(data, dict):
            raise TransportApiError(f"Unexpected response from {url}: expected a JSON object")
        return data

    @staticmethod
    def _extract_list(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
        """Extract a list of objects from a response, tolerating null or missing keys."""
        items = data.get(key) or []
        if not isinstance(items, list):
            logger.warning(f"Expected '{key}' to be a list, got {type(items).__name__}")
            return []
        return [item for item in items if isinstance(item, dict)]

    async def fetch_locations(self, query: str) -> list[dict[str, Any]]:
        """Search stations matching a query.

        Args:
            query: Free-text station query.

        Returns:
            Raw station objects from the ``stations`` field.
        """
        data = await self._get_json(LOCATIONS_PATH, {"query": query, "type": "station"})
        return self._extract_list(data, "stations")

    async def fetch_stationboard(self, station: str, limit: int) -> list[dict[str, Any]]:
        """Fetch the departure board for a station.

        Args:
            station: Station name.
            limit: Maximum number of departures.

        Returns:
            Raw departure objects from the ``stationboard`` field, in upstream order.
        """
        data = await self._get_json(STATIONBOARD_PATH, {"station": station, "limit": limit})
        return self._extract_list(data, "stationboard")

    async def fetch_connections(
        self, from_station: str, to_station: str, limit: int
    ) -> list[dict[str, Any]]:
        """Fetch connections between two stations.

        Args:
            from_station: Departure station name.
            to_station: Arrival station name.
            limit: Maximum number of connections.

        Returns:
            Raw connection objects from the ``connections`` field.
        """
        data = await self._get_json(
            CONNECTIONS_PATH, {"from": from_station, "to": to_station, "limit": limit}
        )
        return self._extract_list(data, "connections")
