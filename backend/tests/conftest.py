"""
Shared fixtures: in-memory stand-ins for Supabase and the reminder scheduler
"""
from datetime import date, datetime, timedelta, timezone
import uuid

import pytest

from habitflow.core.exceptions import RemoteStoreError
from habitflow.services.cache import MemoryCache
from habitflow.services.habits import HabitRegistry
from habitflow.services.logs import CompletionLog
from habitflow.services.profile import ProfileStore

TODAY = date(2024, 3, 15)
USER_ID = "user-1"


class FakeRepository:
    """Same coroutines as HabitRepository, backed by dicts"""

    def __init__(self):
        self.habits = {}
        self.logs = {}
        self.profiles = {}
        self.failing = set()
        self.calls = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.failing:
            raise RemoteStoreError(f"{name} failed")

    def _next_timestamp(self):
        self._clock += timedelta(minutes=1)
        return self._clock.isoformat()

    def add_habit(self, user_id=USER_ID, title="Read", emoji="📖", reminder_time="09:00"):
        habit_id = str(uuid.uuid4())
        self.habits[habit_id] = {
            "id": habit_id,
            "user_id": user_id,
            "title": title,
            "emoji": emoji,
            "reminder_time": reminder_time,
            "created_at": self._next_timestamp()
        }
        return self.habits[habit_id]

    def add_log(self, habit_id, day, completed=True):
        log_id = str(uuid.uuid4())
        self.logs[log_id] = {
            "id": log_id,
            "habit_id": habit_id,
            "date": day.isoformat(),
            "completed": completed,
            "completed_at": self._next_timestamp() if completed else None
        }
        return self.logs[log_id]

    async def get_habits_for_user(self, user_id):
        self._record("get_habits_for_user", user_id)
        rows = [h for h in self.habits.values() if h["user_id"] == user_id]
        return sorted(rows, key=lambda h: h["created_at"], reverse=True)

    async def create_habit(self, habit_data):
        self._record("create_habit", habit_data)
        habit_id = str(uuid.uuid4())
        self.habits[habit_id] = {"id": habit_id, "created_at": self._next_timestamp(), **habit_data}
        return dict(self.habits[habit_id])

    async def update_habit(self, habit_id, update_data):
        self._record("update_habit", habit_id, update_data)
        if habit_id not in self.habits:
            raise RemoteStoreError(f"Habit {habit_id} update returned no row")
        self.habits[habit_id].update(update_data)
        return dict(self.habits[habit_id])

    async def delete_habit(self, habit_id):
        self._record("delete_habit", habit_id)
        self.habits.pop(habit_id, None)

    async def get_logs_since(self, user_id, since):
        self._record("get_logs_since", user_id, since)
        owned = {h["id"] for h in self.habits.values() if h["user_id"] == user_id}
        rows = [
            log for log in self.logs.values()
            if log["habit_id"] in owned and log["date"] >= since.isoformat()
        ]
        return sorted(rows, key=lambda log: log["date"], reverse=True)

    async def create_log(self, log_data):
        self._record("create_log", log_data)
        log_id = str(uuid.uuid4())
        self.logs[log_id] = {"id": log_id, **log_data}
        return dict(self.logs[log_id])

    async def update_log(self, log_id, update_data):
        self._record("update_log", log_id, update_data)
        self.logs[log_id].update(update_data)
        return dict(self.logs[log_id])

    async def get_profile(self, user_id):
        self._record("get_profile", user_id)
        return self.profiles.get(user_id)

    async def update_profile(self, user_id, update_data):
        self._record("update_profile", user_id, update_data)
        if user_id not in self.profiles:
            raise RemoteStoreError(f"Profile {user_id} update returned no row")
        self.profiles[user_id].update(update_data)
        return dict(self.profiles[user_id])


class FakeNotifier:
    """Records reminder calls instead of scheduling jobs"""

    def __init__(self):
        self.calls = []
        self.targets = {}

    async def schedule(self, habit_id, title, emoji, reminder_time, recipient=None, timezone=None):
        self.calls.append(("schedule", habit_id, title, emoji, reminder_time))
        self.targets[habit_id] = (recipient, timezone)

    async def cancel(self, habit_id):
        self.calls.append(("cancel", habit_id))

    async def cancel_all(self):
        self.calls.append(("cancel_all",))


class BrokenCache(MemoryCache):
    """Cache whose writes always fail"""

    async def set(self, key, value):
        raise OSError("disk full")


@pytest.fixture
def repo():
    return FakeRepository()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def cache():
    return MemoryCache()


@pytest.fixture
def registry(repo, cache, notifier):
    return HabitRegistry(repo, cache, notifier)


@pytest.fixture
def completion_log(repo, cache):
    return CompletionLog(repo, cache, today=lambda: TODAY)


@pytest.fixture
def profile_store(repo):
    return ProfileStore(repo)
