"""
Completion Log Service - Per-day completion state and derived metrics
"""
from datetime import date, timedelta
from typing import Callable, Optional, Dict, Any, List
import logging

from pydantic import TypeAdapter

from habitflow.core.constants import LOGS_CACHE_PREFIX, LOG_WINDOW_DAYS, WEEK_DAYS
from habitflow.core.exceptions import InvalidLogDateError
from habitflow.models.habit_log import HabitLog, WeeklyStats
from habitflow.services.cache import read_cached_list, write_cached_list
from habitflow.utils.messages import get_message
from habitflow.utils.timezone import get_local_today, get_utc_now

logger = logging.getLogger(__name__)

LOG_LIST = TypeAdapter(List[HabitLog])


def logs_cache_key(user_id: str) -> str:
    return f"{LOGS_CACHE_PREFIX}{user_id}"


class CompletionLog:
    """
    Owns the completion records of one user's habits over the last
    LOG_WINDOW_DAYS calendar days.

    Args:
        repository: HabitRepository (or any object with the same coroutines)
        cache: Local cache with async get/set/clear
        today: Optional callable returning the current calendar date
    """

    def __init__(self, repository, cache, today: Optional[Callable[[], date]] = None):
        self.repository = repository
        self.cache = cache
        self.today = today or get_local_today
        self.user_id: Optional[str] = None
        self.logs: List[HabitLog] = []
        self.loading = True
        self.error: Optional[str] = None

    def _find(self, habit_id: str, day: date) -> Optional[HabitLog]:
        return next((log for log in self.logs if log.habit_id == habit_id and log.date == day), None)

    def window_start(self) -> date:
        """First day covered by load()"""
        return self.today() - timedelta(days=LOG_WINDOW_DAYS - 1)

    async def _persist(self) -> None:
        if self.user_id:
            await write_cached_list(self.cache, logs_cache_key(self.user_id), LOG_LIST, self.logs)

    async def load(self, user_id: Optional[str]) -> None:
        """
        Load the rolling window of logs: cached copy first, then the remote store
        """
        if not user_id:
            return

        self.user_id = user_id
        self.loading = True
        try:
            cached = await read_cached_list(self.cache, logs_cache_key(user_id), LOG_LIST)
            if cached is not None:
                self.logs = cached

            rows = await self.repository.get_logs_since(user_id, self.window_start())
            self.logs = LOG_LIST.validate_python(rows)
            await self._persist()
            self.error = None
        except Exception as e:
            logger.error(f"Error loading logs: {e}")
            self.error = get_message("logs_load_failed")
        finally:
            self.loading = False

    async def refetch(self) -> None:
        await self.load(self.user_id)

    async def toggle_completion(self, habit_id: str, day: date) -> Dict[str, Any]:
        """
        Flip the completed flag of a habit on a day, creating the record on
        first toggle

        Only days from window_start() through today can be toggled.

        Returns:
            Dict with None or the exception under "error"
        """
        try:
            if not self.window_start() <= day <= self.today():
                raise InvalidLogDateError(
                    f"Date {day} is outside the last {LOG_WINDOW_DAYS} days"
                )

            existing = self._find(habit_id, day)

            if existing:
                completed = not existing.completed
                row = await self.repository.update_log(existing.id, {
                    "completed": completed,
                    "completed_at": get_utc_now().isoformat() if completed else None
                })
                updated = HabitLog(**row)
                self.logs = [updated if log.id == updated.id else log for log in self.logs]
            else:
                row = await self.repository.create_log({
                    "habit_id": habit_id,
                    "date": day.isoformat(),
                    "completed": True,
                    "completed_at": get_utc_now().isoformat()
                })
                self.logs = [HabitLog(**row), *self.logs]

            await self._persist()
            return {"error": None}
        except Exception as e:
            logger.error(f"Toggle habit completion error: {e}")
            return {"error": e}

    def is_completed_on(self, habit_id: str, day: date) -> bool:
        log = self._find(habit_id, day)
        return log.completed if log else False

    def streak_length(self, habit_id: str) -> int:
        """
        Count consecutive completed days walking back from today

        The chain has to include today: a habit last completed yesterday has
        a streak of 0.
        """
        completed = sorted(
            (log for log in self.logs if log.habit_id == habit_id and log.completed),
            key=lambda log: log.date,
            reverse=True
        )

        streak = 0
        cursor = self.today()
        for log in completed:
            if log.date != cursor:
                break
            streak += 1
            cursor -= timedelta(days=1)
        return streak

    def weekly_stats(self, habit_id: str) -> WeeklyStats:
        """
        Completed days over the trailing 7 days including today

        The percentage is over a fixed 7 days, whatever the habit's age.
        """
        window_start = self.today() - timedelta(days=WEEK_DAYS - 1)
        completed = sum(
            1 for log in self.logs
            if log.habit_id == habit_id and log.completed and log.date >= window_start
        )
        return WeeklyStats(
            completed=completed,
            total=WEEK_DAYS,
            percentage=round(completed / WEEK_DAYS * 100)
        )
