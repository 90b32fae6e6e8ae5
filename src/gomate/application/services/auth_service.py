"""Session service: login, mock registration, restore and logout."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from pydantic import ValidationError

from gomate.application.errors import AuthenticationFailedError, ValidationFailedError
from gomate.domain.exceptions import UpstreamApiError
from gomate.domain.models.credentials import (
    LoginCredentials,
    RegistrationRequest,
    first_validation_message,
)
from gomate.domain.models.user import User

if TYPE_CHECKING:
    from gomate.domain.ports import AuthRepository, KeyValueStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "userToken"
USER_KEY = "userData"

INVALID_CREDENTIALS_MESSAGE = (
    'Invalid credentials. Try username: "emilys" and password: "emilyspass"'
)
LOGIN_FAILED_MESSAGE = "Login failed"


class AuthService:
    """Authenticates users and keeps the session in the key-value store."""

    def __init__(
        self,
        auth_repository: AuthRepository,
        storage: KeyValueStore,
        rng: random.Random | None = None,
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            auth_repository: Remote login endpoint.
            storage: Store for the session token and profile.
            rng: Random generator for mock registration ids.
            clock_ms: Epoch milliseconds for mock registration tokens.
        """
        self._auth_repository = auth_repository
        self._storage = storage
        self._rng = rng or random.Random()
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)

    async def login(self, username: str, password: str) -> User:
        """Validate credentials, authenticate and return the user.

        Persisting the session is left to the caller.

        Raises:
            ValidationFailedError: If the credentials fail form validation.
            AuthenticationFailedError: If the auth service rejected the login.
        """
        try:
            credentials = LoginCredentials(username=username, password=password)
        except ValidationError as e:
            raise ValidationFailedError(first_validation_message(e)) from e

        try:
            user = await self._auth_repository.login(credentials.username, credentials.password)
        except UpstreamApiError as e:
            logger.warning(f"Login failed for {credentials.username}: {e}")
            raise AuthenticationFailedError(self.login_error_message(e)) from e

        logger.info(f"Logged in as {user.username}")
        return user

    @staticmethod
    def login_error_message(error: UpstreamApiError) -> str:
        """User-facing message for a failed login."""
        if error.status_code == 400:
            return INVALID_CREDENTIALS_MESSAGE
        return error.upstream_message or LOGIN_FAILED_MESSAGE

    def register(
        self,
        first_name: str,
        last_name: str,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> User:
        """Create a local mock account. No request is sent.

        Raises:
            ValidationFailedError: If the form fails validation.
        """
        try:
            request = RegistrationRequest(
                first_name=first_name,
                last_name=last_name,
                username=username,
                email=email,
                password=password,
                confirm_password=confirm_password,
            )
        except ValidationError as e:
            raise ValidationFailedError(first_validation_message(e)) from e

        user = User(
            id=self._rng.randrange(1000),
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            token=f"mock-token-{self._clock_ms()}",
        )
        logger.info(f"Registered mock user {user.username}")
        return user

    async def save_session(self, user: User) -> None:
        """Persist the token and profile."""
        await self._storage.set_item(TOKEN_KEY, user.token or "")
        await self._storage.set_item(USER_KEY, user.model_dump_json(by_alias=True))

    async def restore_session(self) -> User | None:
        """Read the persisted session. Missing or corrupt data gives None."""
        try:
            token = await self._storage.get_item(TOKEN_KEY)
            user_data = await self._storage.get_item(USER_KEY)
            if not token or not user_data:
                return None
            user = User.model_validate_json(user_data)
        except ValidationError as e:
            logger.warning(f"Stored session is invalid, ignoring it: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to restore session: {e}", exc_info=True)
            return None

        logger.info(f"Restored session for {user.username}")
        return user if user.token == token else user.model_copy(update={"token": token})

    async def clear_session(self) -> None:
        """Remove the persisted token and profile."""
        await self._storage.remove_item(TOKEN_KEY)
        await self._storage.remove_item(USER_KEY)
