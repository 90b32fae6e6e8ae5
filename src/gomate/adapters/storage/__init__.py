"""Key-value storage adapters."""

from gomate.adapters.storage.in_memory_store import InMemoryKeyValueStore
from gomate.adapters.storage.json_file_store import JsonFileKeyValueStore

__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore"]
