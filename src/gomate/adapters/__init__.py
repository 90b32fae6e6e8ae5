"""Adapters layer - external system integrations."""

from gomate.adapters.auth_api import DummyJsonAuthRepository
from gomate.adapters.config import AppConfig
from gomate.adapters.storage import InMemoryKeyValueStore, JsonFileKeyValueStore
from gomate.adapters.transport_api import OpenDataTransportRepository

__all__ = [
    "AppConfig",
    "DummyJsonAuthRepository",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "OpenDataTransportRepository",
]
