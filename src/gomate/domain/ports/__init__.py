"""Ports (interfaces) for the ports-and-adapters architecture."""

from gomate.domain.ports.auth_repository import AuthRepository
from gomate.domain.ports.key_value_store import KeyValueStore
from gomate.domain.ports.transport_repository import TransportRepository

__all__ = [
    "AuthRepository",
    "KeyValueStore",
    "TransportRepository",
]
