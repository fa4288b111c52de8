from typing import List
import threading

from pydantic import TypeAdapter
import pytest

from habitflow.core.exceptions import SerializationError
from habitflow.models.habit_log import HabitLog
from habitflow.services.cache import FileCache, MemoryCache, read_cached_list, write_cached_list

from conftest import TODAY, BrokenCache

LOGS = TypeAdapter(List[HabitLog])


async def test_file_cache_get_set_clear(tmp_path):
    cache = FileCache(str(tmp_path / "cache"))

    assert await cache.get("habits_u1") is None
    await cache.set("habits_u1", "[]")
    await cache.set("logs_u1", "[1]")
    assert await cache.get("habits_u1") == "[]"

    await cache.clear()

    assert await cache.get("habits_u1") is None
    assert await cache.get("logs_u1") is None


async def test_file_cache_io_runs_off_the_event_loop(tmp_path, monkeypatch):
    cache = FileCache(str(tmp_path / "cache"))
    threads = []
    original_write = FileCache._write

    def tracking_write(self, key, value):
        threads.append(threading.get_ident())
        original_write(self, key, value)

    monkeypatch.setattr(FileCache, "_write", tracking_write)

    await cache.set("habits_u1", "[]")

    assert threads and threads[0] != threading.get_ident()
    assert await cache.get("habits_u1") == "[]"


async def test_memory_cache_clear():
    cache = MemoryCache()
    await cache.set("k", "v")

    await cache.clear()

    assert await cache.get("k") is None


async def test_cached_list_round_trip():
    cache = MemoryCache()
    logs = [HabitLog(id="l1", habit_id="h1", date=TODAY, completed=True)]

    await write_cached_list(cache, "logs_u1", LOGS, logs)

    assert await read_cached_list(cache, "logs_u1", LOGS) == logs


@pytest.mark.parametrize("raw", ["{broken", '[{"id": "l1"}]', '{"not": "a list"}'])
async def test_unreadable_entry_is_a_miss(raw):
    cache = MemoryCache()
    await cache.set("logs_u1", raw)

    assert await read_cached_list(cache, "logs_u1", LOGS) is None


async def test_missing_entry_is_a_miss():
    assert await read_cached_list(MemoryCache(), "logs_u1", LOGS) is None


async def test_failed_write_raises_serialization_error():
    with pytest.raises(SerializationError):
        await write_cached_list(BrokenCache(), "logs_u1", LOGS, [])
