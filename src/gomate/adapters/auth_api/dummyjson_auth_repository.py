"""Authentication repository adapter backed by the DummyJSON mock auth service.

API Documentation: https://dummyjson.com/docs/auth
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from gomate.adapters.api_request_logger import log_api_request
from gomate.domain.exceptions import UpstreamApiError
from gomate.domain.models.user import User
from gomate.domain.ports.auth_repository import AuthRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

AUTH_API_BASE_URL = "https://dummyjson.com"
LOGIN_PATH = "/auth/login"  # POST {username, password}

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class AuthApiError(UpstreamApiError):
    """A login request failed or returned an unusable response."""


class DummyJsonAuthRepository(AuthRepository):
    """Adapter for the DummyJSON authentication endpoint."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = AUTH_API_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with optional aiohttp session."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def login(self, username: str, password: str) -> User:
        """Authenticate against ``POST /auth/login``.

        Args:
            username: Account username.
            password: Account password.

        Returns:
            User with the access token in ``token``.

        Raises:
            AuthApiError: On a non-200 response, a transport failure or a
                response missing required fields.
        """
        if not self._session:
            raise RuntimeError("Auth API requires an aiohttp session")

        url = f"{self._base_url}{LOGIN_PATH}"
        payload = {"username": username, "password": password}
        log_api_request("POST", url, headers=DEFAULT_HEADERS, payload=payload)

        try:
            async with self._session.post(
                url, json=payload, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                data = await self._read_json(response)
                if response.status != 200:
                    message = data.get("message") if isinstance(data, dict) else None
                    raise AuthApiError(
                        f"Got response ({response.status}) from {url}: {message or 'no message'}",
                        status_code=response.status,
                        upstream_message=message,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise AuthApiError(f"Request to {url} failed: {e}") from e

        if not isinstance(data, dict):
            raise AuthApiError(f"Unexpected response from {url}: expected a JSON object")
        return self._build_user(data, url)

    @staticmethod
    async def _read_json(response: "ClientResponse") -> Any:
        """Decode a JSON body, returning None if it is not JSON."""
        try:
            return await response.json(content_type=None)
        except ValueError:
            return None

    @staticmethod
    def _build_user(data: dict[str, Any], url: str) -> User:
        """Build a User from the login response."""
        try:
            return User(
                id=data["id"],
                username=data["username"],
                email=data.get("email") or "",
                first_name=data.get("firstName") or "",
                last_name=data.get("lastName") or "",
                token=data["accessToken"],
            )
        except (KeyError, ValidationError) as e:
            raise AuthApiError(f"Incomplete login response from {url}: {e}") from e
