"""
Profile Routes - The signed-in user's profile
"""
from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException

from habitflow.core.constants import TIMEZONE_OPTIONS
from habitflow.core.dependencies import get_current_user_id, get_habit_registry, get_profile_store
from habitflow.models.profile import ProfileUpdate
from habitflow.utils.messages import greeting
from habitflow.utils.timezone import get_local_now
from habitflow.routes.errors import raise_for_error, require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])

REMINDER_TARGET_FIELDS = ("timezone", "whatsapp_number")


def _profile_response(store):
    return {
        "status": "success",
        "profile": store.profile,
        "display_name": store.display_name(),
        "initials": store.initials(),
        "greeting": greeting(get_local_now(store.profile.timezone).hour)
    }


@router.get("")
async def get_profile(user_id: Optional[str] = Depends(get_current_user_id),
                      store=Depends(get_profile_store)):
    """Get the profile with its derived display fields"""
    await store.load(require_user(user_id))
    if store.profile is None:
        raise HTTPException(status_code=404, detail=store.error)
    return _profile_response(store)


@router.get("/timezones")
async def list_timezones():
    """Timezones offered in the profile editor"""
    return {"timezones": TIMEZONE_OPTIONS}


@router.patch("")
async def update_profile(request: ProfileUpdate,
                         user_id: Optional[str] = Depends(get_current_user_id),
                         store=Depends(get_profile_store),
                         registry=Depends(get_habit_registry)):
    """Update full name, timezone and reminder contact, then re-target reminders"""
    updates = request.model_dump(exclude_unset=True)
    result = await store.update(user_id, updates)
    raise_for_error(result["error"], "profile_update_failed")

    if any(field in updates for field in REMINDER_TARGET_FIELDS):
        await registry.load(user_id)
        if registry.error:
            logger.warning(f"Could not reload habits of user {user_id} - reminders keep their old target")
        else:
            registry.owner = store.profile
            await registry.reschedule_all()

    return _profile_response(store)
