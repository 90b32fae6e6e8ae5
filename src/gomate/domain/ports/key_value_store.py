"""Key-value store port."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Port for small persisted string values (session, favorites, theme)."""

    async def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        ...

    async def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""
        ...
