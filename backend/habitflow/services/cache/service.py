"""
Local Cache - Key/value storage used as a stale-while-revalidate layer
The remote store stays the source of truth; the cache only saves a round-trip.
"""
from pathlib import Path
from typing import Dict, List, Optional, TypeVar
import logging

from fastapi.concurrency import run_in_threadpool
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from habitflow.core.exceptions import SerializationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MemoryCache:
    """Process-local cache backed by a dict"""

    def __init__(self):
        self._items: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set(self, key: str, value: str) -> None:
        self._items[key] = value

    async def clear(self) -> None:
        self._items.clear()


class FileCache:
    """
    Cache that keeps one JSON file per key in a directory

    File access runs in the threadpool so the event loop is never blocked.

    Args:
        cache_dir: Directory holding the cache files, created on first write
    """

    def __init__(self, cache_dir: str):
        self.cache_dir = Path(cache_dir)

    def _path(self, key: str) -> Path:
        return self.cache_dir / f"{key}.json"

    def _read(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, key: str, value: str) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def _clear(self) -> None:
        if not self.cache_dir.exists():
            return
        for path in self.cache_dir.glob("*.json"):
            path.unlink()

    async def get(self, key: str) -> Optional[str]:
        return await run_in_threadpool(self._read, key)

    async def set(self, key: str, value: str) -> None:
        await run_in_threadpool(self._write, key, value)

    async def clear(self) -> None:
        await run_in_threadpool(self._clear)


async def read_cached_list(cache, key: str, adapter: TypeAdapter) -> Optional[List[T]]:
    """
    Best-effort read of a cached list

    Any read or parse failure is logged and treated as a cache miss.

    Returns:
        Parsed list, or None on miss
    """
    try:
        raw = await cache.get(key)
        if not raw:
            return None
        return adapter.validate_json(raw)
    except (OSError, ValueError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable cache entry '{key}': {e}")
        return None


async def write_cached_list(cache, key: str, adapter: TypeAdapter, items: List[T]) -> None:
    """
    Overwrite a cached list

    Raises:
        SerializationError: If the list cannot be encoded or stored
    """
    try:
        await cache.set(key, adapter.dump_json(items).decode("utf-8"))
    except (OSError, ValueError, PydanticSerializationError) as e:
        logger.error(f"Failed to write cache entry '{key}': {e}")
        raise SerializationError(f"Failed to write cache entry '{key}': {e}") from e
