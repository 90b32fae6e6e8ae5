"""In-memory key-value store implementation."""

from gomate.domain.ports.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Key-value store that lives for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            initial: Optional values to start with.
        """
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        """Get a stored value, or None if not found."""
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        """Store a value."""
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        """Remove a value if present."""
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of all stored values."""
        return dict(self._items)
