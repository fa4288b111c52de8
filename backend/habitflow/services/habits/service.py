"""
Habits Service - Habit Registry state manager
Handles loading, creating, updating and deleting a user's habits
"""
from typing import Optional, Dict, Any, List
import logging

from pydantic import TypeAdapter, ValidationError

from habitflow.core.constants import HABITS_CACHE_PREFIX
from habitflow.core.exceptions import InvalidHabitDataError, NotAuthenticatedError
from habitflow.models.habit import Habit, HabitCreate, HabitUpdate
from habitflow.models.profile import Profile
from habitflow.services.cache import read_cached_list, write_cached_list
from habitflow.utils.messages import get_message

logger = logging.getLogger(__name__)

HABIT_LIST = TypeAdapter(List[Habit])

REMINDER_FIELDS = ("title", "emoji", "reminder_time")


def habits_cache_key(user_id: str) -> str:
    return f"{HABITS_CACHE_PREFIX}{user_id}"


class HabitRegistry:
    """
    Owns the list of habits for one user.

    The list is served from the local cache first and then replaced by the
    remote copy. Create, update and delete keep the reminder schedule in step.
    Reminders go to the owner's contact in the owner's timezone.

    Args:
        repository: HabitRepository (or any object with the same coroutines)
        cache: Local cache with async get/set/clear
        notifier: ReminderScheduler (or any object with async schedule/cancel)
        owner: Optional Profile of the user, used to address reminders
    """

    def __init__(self, repository, cache, notifier, owner: Optional[Profile] = None):
        self.repository = repository
        self.cache = cache
        self.notifier = notifier
        self.owner = owner
        self.user_id: Optional[str] = None
        self.habits: List[Habit] = []
        self.loading = True
        self.error: Optional[str] = None

    def get(self, habit_id: str) -> Optional[Habit]:
        return next((h for h in self.habits if h.id == habit_id), None)

    async def _persist(self) -> None:
        if self.user_id:
            await write_cached_list(self.cache, habits_cache_key(self.user_id), HABIT_LIST, self.habits)

    async def _schedule(self, habit: Habit) -> None:
        await self.notifier.schedule(
            habit.id, habit.title, habit.emoji, habit.reminder_time,
            recipient=self.owner.whatsapp_number if self.owner else None,
            timezone=self.owner.timezone if self.owner else None
        )

    async def load(self, user_id: Optional[str]) -> None:
        """
        Load habits for a user: cached copy first, then the remote store

        On failure the previously loaded list is kept and `error` is set.
        """
        if not user_id:
            return

        self.user_id = user_id
        self.loading = True
        try:
            cached = await read_cached_list(self.cache, habits_cache_key(user_id), HABIT_LIST)
            if cached is not None:
                self.habits = cached

            rows = await self.repository.get_habits_for_user(user_id)
            self.habits = HABIT_LIST.validate_python(rows)
            await self._persist()
            self.error = None
        except Exception as e:
            logger.error(f"Error loading habits: {e}")
            self.error = get_message("habits_load_failed")
        finally:
            self.loading = False

    async def refetch(self) -> None:
        await self.load(self.user_id)

    async def reschedule_all(self) -> None:
        """Point every loaded habit's reminder at the current owner contact and timezone"""
        for habit in self.habits:
            await self._schedule(habit)

    async def create(self, user_id: Optional[str], habit_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a habit and schedule its daily reminder

        Args:
            user_id: The owning user id
            habit_data: title, emoji and reminder_time

        Returns:
            Dict with the created Habit under "data" and None or the exception under "error"
        """
        if not user_id:
            return {"data": None, "error": NotAuthenticatedError()}

        try:
            try:
                request = HabitCreate(**habit_data)
            except ValidationError as e:
                raise InvalidHabitDataError(str(e)) from e

            row = await self.repository.create_habit({**request.model_dump(), "user_id": user_id})
            habit = Habit(**row)

            self.user_id = user_id
            self.habits = [habit, *self.habits]
            await self._persist()

            await self._schedule(habit)
            return {"data": habit, "error": None}
        except Exception as e:
            logger.error(f"Error creating habit: {e}")
            return {"data": None, "error": e}

    async def update(self, habit_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update to a habit

        The reminder is rescheduled when title, emoji or reminder_time change.
        """
        try:
            try:
                update_data = HabitUpdate(**updates).model_dump(exclude_none=True)
            except ValidationError as e:
                raise InvalidHabitDataError(str(e)) from e
            if not update_data:
                raise InvalidHabitDataError("Must provide at least one of title, emoji or reminder_time")

            row = await self.repository.update_habit(habit_id, update_data)
            habit = Habit(**row)

            self.habits = [habit if h.id == habit_id else h for h in self.habits]
            await self._persist()

            if any(field in update_data for field in REMINDER_FIELDS):
                await self._schedule(habit)
            return {"data": habit, "error": None}
        except Exception as e:
            logger.error(f"Error updating habit {habit_id}: {e}")
            return {"data": None, "error": e}

    async def delete(self, habit_id: str) -> Dict[str, Any]:
        """
        Delete a habit, then drop it locally and cancel its reminder

        Nothing local changes unless the remote delete succeeds. Once it
        has, the reminder is cancelled even if the cache write fails.
        """
        try:
            await self.repository.delete_habit(habit_id)

            self.habits = [h for h in self.habits if h.id != habit_id]
            try:
                await self._persist()
            finally:
                await self.notifier.cancel(habit_id)
            return {"error": None}
        except Exception as e:
            logger.error(f"Error deleting habit {habit_id}: {e}")
            return {"error": e}
