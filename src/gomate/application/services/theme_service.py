"""Theme preference persistence."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gomate.domain.ports import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "gomate_theme"
DARK = "dark"
LIGHT = "light"


class ThemeService:
    """Reads and writes the dark-mode flag."""

    def __init__(self, storage: KeyValueStore) -> None:
        self._storage = storage

    async def load(self) -> bool:
        """Return True if dark mode is stored. Errors give light mode."""
        try:
            return await self._storage.get_item(THEME_KEY) == DARK
        except Exception as e:
            logger.error(f"Failed to load theme: {e}", exc_info=True)
            return False

    async def save(self, is_dark_mode: bool) -> None:
        await self._storage.set_item(THEME_KEY, DARK if is_dark_mode else LIGHT)
        logger.debug(f"Saved theme: {DARK if is_dark_mode else LIGHT}")
