"""Favorites list operations and persistence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from gomate.domain.models.destination import Destination

if TYPE_CHECKING:
    from gomate.domain.ports import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "gomate_favorites"

_favorites_adapter = TypeAdapter(list[Destination])


def contains(favorites: list[Destination], destination_id: int) -> bool:
    """Check whether a destination id is in the favorites list."""
    return any(favorite.id == destination_id for favorite in favorites)


def add_favorite(favorites: list[Destination], destination: Destination) -> list[Destination]:
    """Append a destination unless its id is already present."""
    if contains(favorites, destination.id):
        return list(favorites)
    return [*favorites, destination]


def remove_favorite(favorites: list[Destination], destination_id: int) -> list[Destination]:
    """Drop every entry with the given id."""
    return [favorite for favorite in favorites if favorite.id != destination_id]


def toggle_favorite(favorites: list[Destination], destination: Destination) -> list[Destination]:
    """Remove the destination if present by id, otherwise append it."""
    if contains(favorites, destination.id):
        return remove_favorite(favorites, destination.id)
    return [*favorites, destination]


class FavoritesService:
    """Loads and saves the favorites list in the key-value store."""

    def __init__(self, storage: KeyValueStore) -> None:
        """Initialize with the key-value store holding the favorites."""
        self._storage = storage

    async def load(self) -> list[Destination]:
        """Read the stored favorites. Missing or unreadable data gives an empty list."""
        try:
            raw = await self._storage.get_item(FAVORITES_KEY)
            if not raw:
                return []
            favorites = _favorites_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Stored favorites are invalid, starting empty: {e}")
            return []
        except Exception as e:
            logger.error(f"Failed to load favorites: {e}", exc_info=True)
            return []

        # Keep the first entry per id
        unique: list[Destination] = []
        for favorite in favorites:
            unique = add_favorite(unique, favorite)
        logger.debug(f"Loaded {len(unique)} favorite(s)")
        return unique

    async def save(self, favorites: list[Destination]) -> None:
        """Write the full favorites list as JSON."""
        payload = _favorites_adapter.dump_json(favorites, by_alias=True).decode("utf-8")
        await self._storage.set_item(FAVORITES_KEY, payload)
        logger.debug(f"Saved {len(favorites)} favorite(s)")
