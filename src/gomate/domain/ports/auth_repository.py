"""Authentication repository port."""

from typing import Protocol

from gomate.domain.models.user import User


class AuthRepository(Protocol):
    """Port for the remote authentication service."""

    async def login(self, username: str, password: str) -> User:
        """Authenticate and return the user profile including its access token."""
        ...
