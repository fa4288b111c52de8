"""
Habits Repository - Centralized database access layer
All Supabase queries for habits, completion logs and user profiles
"""
from datetime import date
from typing import List, Dict, Any, Optional
import logging

from supabase import AsyncClient

from habitflow.core.exceptions import RemoteStoreError

logger = logging.getLogger(__name__)


class HabitRepository:
    """
    Thin async wrapper over the Supabase tables used by the app.

    Every failure is logged and re-raised as RemoteStoreError; the store
    itself enforces uniqueness and foreign keys.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

    # ========================================================================
    # HABITS TABLE
    # ========================================================================

    async def get_habits_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get all habits owned by a user, newest first

        Args:
            user_id: The owning user id

        Returns:
            List of habit dictionaries

        Raises:
            RemoteStoreError: If query fails
        """
        try:
            result = await self.client.table("habits")\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
            return result.data
        except Exception as e:
            logger.error(f"Database error fetching habits for user {user_id}: {e}")
            raise RemoteStoreError(f"Failed to fetch habits: {e}") from e

    async def create_habit(self, habit_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new habit

        Args:
            habit_data: Column values including user_id

        Returns:
            Created habit row

        Raises:
            RemoteStoreError: If insert fails or returns no row
        """
        try:
            result = await self.client.table("habits").insert(habit_data).execute()
        except Exception as e:
            logger.error(f"Database error creating habit: {e}")
            raise RemoteStoreError(f"Failed to create habit: {e}") from e
        if not result.data:
            raise RemoteStoreError("Habit insert returned no row")
        return result.data[0]

    async def update_habit(self, habit_id: str, update_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a habit by id

        Args:
            habit_id: The habit id
            update_data: Dictionary of fields to update

        Returns:
            Updated habit row

        Raises:
            RemoteStoreError: If update fails or matched no row
        """
        try:
            result = await self.client.table("habits").update(update_data).eq("id", habit_id).execute()
        except Exception as e:
            logger.error(f"Database error updating habit {habit_id}: {e}")
            raise RemoteStoreError(f"Failed to update habit: {e}") from e
        if not result.data:
            raise RemoteStoreError(f"Habit {habit_id} update returned no row")
        return result.data[0]

    async def delete_habit(self, habit_id: str) -> None:
        """
        Delete a habit by id. Logs cascade server-side.

        Raises:
            RemoteStoreError: If delete fails
        """
        try:
            await self.client.table("habits").delete().eq("id", habit_id).execute()
        except Exception as e:
            logger.error(f"Database error deleting habit {habit_id}: {e}")
            raise RemoteStoreError(f"Failed to delete habit: {e}") from e

    # ========================================================================
    # HABIT_LOGS TABLE
    # ========================================================================

    async def get_logs_since(self, user_id: str, since: date) -> List[Dict[str, Any]]:
        """
        Get completion logs for all of a user's habits from a date onward

        Args:
            user_id: The owning user id
            since: Earliest calendar date to include

        Returns:
            List of log dictionaries, newest date first

        Raises:
            RemoteStoreError: If query fails
        """
        try:
            result = await self.client.table("habit_logs")\
                .select("*, habits!inner(user_id)")\
                .eq("habits.user_id", user_id)\
                .gte("date", str(since))\
                .order("date", desc=True)\
                .execute()
        except Exception as e:
            logger.error(f"Database error fetching logs for user {user_id}: {e}")
            raise RemoteStoreError(f"Failed to fetch logs: {e}") from e

        # Drop the embedded join column
        return [{k: v for k, v in row.items() if k != "habits"} for row in result.data]

    async def create_log(self, log_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a completion log

        Raises:
            RemoteStoreError: If insert fails or returns no row
        """
        try:
            result = await self.client.table("habit_logs").insert(log_data).execute()
        except Exception as e:
            logger.error(f"Database error creating log: {e}")
            raise RemoteStoreError(f"Failed to create log: {e}") from e
        if not result.data:
            raise RemoteStoreError("Log insert returned no row")
        return result.data[0]

    async def update_log(self, log_id: str, update_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a completion log by id

        Raises:
            RemoteStoreError: If update fails or matched no row
        """
        try:
            result = await self.client.table("habit_logs").update(update_data).eq("id", log_id).execute()
        except Exception as e:
            logger.error(f"Database error updating log {log_id}: {e}")
            raise RemoteStoreError(f"Failed to update log: {e}") from e
        if not result.data:
            raise RemoteStoreError(f"Log {log_id} update returned no row")
        return result.data[0]

    # ========================================================================
    # USERS TABLE
    # ========================================================================

    async def get_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a profile row by user id

        Returns:
            Profile dictionary or None if not found

        Raises:
            RemoteStoreError: If query fails
        """
        try:
            result = await self.client.table("users").select("*").eq("id", user_id).limit(1).execute()
        except Exception as e:
            logger.error(f"Database error fetching profile {user_id}: {e}")
            raise RemoteStoreError(f"Failed to fetch profile: {e}") from e
        return result.data[0] if result.data else None

    async def update_profile(self, user_id: str, update_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a profile row by user id

        Raises:
            RemoteStoreError: If update fails or matched no row
        """
        try:
            result = await self.client.table("users").update(update_data).eq("id", user_id).execute()
        except Exception as e:
            logger.error(f"Database error updating profile {user_id}: {e}")
            raise RemoteStoreError(f"Failed to update profile: {e}") from e
        if not result.data:
            raise RemoteStoreError(f"Profile {user_id} update returned no row")
        return result.data[0]
