"""Mock authentication service adapter."""

from gomate.adapters.auth_api.dummyjson_auth_repository import (
    AuthApiError,
    DummyJsonAuthRepository,
)

__all__ = ["AuthApiError", "DummyJsonAuthRepository"]
