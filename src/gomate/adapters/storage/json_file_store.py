"""Key-value store persisted as a single JSON object on disk."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from gomate.domain.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Stores string values in one JSON file.

    Reads and writes go through an asyncio.Lock and run in a worker thread.
    Writes replace the file atomically. A write over a file that does not
    hold a JSON object starts from an empty store.
    """

    def __init__(self, path: Path | str) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file. Parent directories are created on first write.
        """
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def _read_all(self) -> dict[str, str]:
        """Read the whole file; a missing file is an empty store."""
        if not self._path.exists():
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self._path} does not contain a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def _read_for_update(self) -> dict[str, str]:
        """Read the file before a write; unreadable content is replaced by the write."""
        try:
            return self._read_all()
        except ValueError as e:
            logger.error(f"Discarding unreadable storage file {self._path}: {e}")
            return {}

    def _write_all(self, items: dict[str, str]) -> None:
        """Write the whole file atomically."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".gomate-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get_item(self, key: str) -> str | None:
        """Get a stored value, or None if not found."""
        async with self._lock:
            items = await asyncio.to_thread(self._read_all)
        return items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        """Store a value."""
        async with self._lock:
            items = await asyncio.to_thread(self._read_for_update)
            items[key] = value
            await asyncio.to_thread(self._write_all, items)
        logger.debug(f"Stored '{key}' in {self._path}")

    async def remove_item(self, key: str) -> None:
        """Remove a value if present."""
        async with self._lock:
            items = await asyncio.to_thread(self._read_for_update)
            if key not in items:
                return
            del items[key]
            await asyncio.to_thread(self._write_all, items)
        logger.debug(f"Removed '{key}' from {self._path}")
