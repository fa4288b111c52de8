"""
Habit Routes - Endpoints for habit management and completion
"""
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException

from habitflow.core.constants import EMOJI_PALETTE
from habitflow.core.dependencies import (
    get_completion_log,
    get_current_user_id,
    get_habit_registry,
    get_profile_store
)
from habitflow.core.exceptions import HabitNotFoundError
from habitflow.models.habit import HabitCreate, HabitUpdate
from habitflow.models.habit_log import ToggleRequest
from habitflow.services.logs import get_habit_stats
from habitflow.routes.errors import raise_for_error, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/habits", tags=["habits"])


async def _load_owned_habit(user_id: Optional[str], habit_id: str, registry):
    """Load the user's habits and make sure habit_id is one of them"""
    await registry.load(require_user(user_id))
    habit = registry.get(habit_id)
    if habit is None:
        if registry.error:
            raise HTTPException(status_code=500, detail=registry.error)
        raise_for_error(HabitNotFoundError(f"Habit {habit_id} not found"), "habits_load_failed")
    return habit


async def _load_owner(user_id: str, registry, profile_store) -> None:
    """Address the registry's reminders to the user's profile contact and timezone"""
    await profile_store.load(user_id)
    if profile_store.profile is None:
        logger.warning(f"Profile unavailable for user {user_id} - reminders will not be delivered")
    registry.owner = profile_store.profile


@router.get("")
async def list_habits(user_id: Optional[str] = Depends(get_current_user_id),
                      registry=Depends(get_habit_registry)):
    """Get the user's habits, newest first"""
    await registry.load(require_user(user_id))
    return {
        "status": "success",
        "habits": registry.habits,
        "error": registry.error
    }


@router.get("/emojis")
async def list_emojis():
    """Suggested emoji palette"""
    return {"emojis": EMOJI_PALETTE}


@router.post("")
async def create_habit(request: HabitCreate,
                       user_id: Optional[str] = Depends(get_current_user_id),
                       registry=Depends(get_habit_registry),
                       profile_store=Depends(get_profile_store)):
    """Create a habit and schedule its daily reminder"""
    await registry.load(require_user(user_id))
    await _load_owner(user_id, registry, profile_store)
    result = await registry.create(user_id, request.model_dump())
    raise_for_error(result["error"], "habit_create_failed")
    return {"status": "success", "data": result["data"]}


@router.patch("/{habit_id}")
async def update_habit(habit_id: str, request: HabitUpdate,
                       user_id: Optional[str] = Depends(get_current_user_id),
                       registry=Depends(get_habit_registry),
                       profile_store=Depends(get_profile_store)):
    """Update a habit's title, emoji or reminder time"""
    await _load_owned_habit(user_id, habit_id, registry)
    await _load_owner(user_id, registry, profile_store)
    result = await registry.update(habit_id, request.model_dump(exclude_unset=True))
    raise_for_error(result["error"], "habit_update_failed")
    return {"status": "success", "data": result["data"]}


@router.delete("/{habit_id}")
async def delete_habit(habit_id: str,
                       user_id: Optional[str] = Depends(get_current_user_id),
                       registry=Depends(get_habit_registry)):
    """Delete a habit and cancel its reminder"""
    await _load_owned_habit(user_id, habit_id, registry)
    result = await registry.delete(habit_id)
    raise_for_error(result["error"], "habit_delete_failed")
    return {"status": "success", "habit_id": habit_id}


@router.post("/{habit_id}/toggle")
async def toggle_habit(habit_id: str, request: Optional[ToggleRequest] = None,
                       user_id: Optional[str] = Depends(get_current_user_id),
                       registry=Depends(get_habit_registry),
                       completion_log=Depends(get_completion_log)):
    """Toggle a habit's completion for a day (today by default)"""
    habit = await _load_owned_habit(user_id, habit_id, registry)
    await completion_log.load(user_id)
    # A stale window misses existing records, so never toggle against one
    if completion_log.error:
        raise HTTPException(status_code=500, detail=completion_log.error)

    day = (request.date if request else None) or completion_log.today()
    result = await completion_log.toggle_completion(habit_id, day)
    raise_for_error(result["error"], "toggle_failed")

    return {
        "status": "success",
        "habit_id": habit_id,
        "date": str(day),
        "completed": completion_log.is_completed_on(habit_id, day),
        "streak": completion_log.streak_length(habit.id)
    }


@router.get("/{habit_id}/stats")
async def habit_stats(habit_id: str,
                      user_id: Optional[str] = Depends(get_current_user_id),
                      registry=Depends(get_habit_registry),
                      completion_log=Depends(get_completion_log)):
    """Streak, weekly stats and today's completion for one habit"""
    habit = await _load_owned_habit(user_id, habit_id, registry)
    await completion_log.load(user_id)
    return {"status": "success", **get_habit_stats(habit, completion_log)}
