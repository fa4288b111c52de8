"""
Dependency injection for shared clients and resources
"""
from typing import Optional

from fastapi import Depends, Header
from supabase import acreate_client, AsyncClient

from habitflow.core.auth import resolve_user_id
from habitflow.core.config import settings
from habitflow.services.cache import FileCache, MemoryCache
from habitflow.services.habits import HabitRegistry, HabitRepository
from habitflow.services.logs import CompletionLog
from habitflow.services.notifications import ReminderScheduler, send_whatsapp_reminder
from habitflow.services.profile import ProfileStore

# Shared instances, created on first use
_supabase_client: Optional[AsyncClient] = None
_cache = None
_reminder_scheduler: Optional[ReminderScheduler] = None


async def get_supabase_client() -> AsyncClient:
    """Get Supabase client instance"""
    global _supabase_client
    if _supabase_client is None:
        _supabase_client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _supabase_client


async def get_repository() -> HabitRepository:
    """Get a repository bound to the shared Supabase client"""
    return HabitRepository(await get_supabase_client())


def get_cache():
    """Get the local cache configured by CACHE_BACKEND"""
    global _cache
    if _cache is None:
        if settings.CACHE_BACKEND == "file":
            _cache = FileCache(settings.CACHE_DIR)
        else:
            _cache = MemoryCache()
    return _cache


def get_reminder_scheduler() -> ReminderScheduler:
    """Get the reminder scheduler, delivering through WhatsApp"""
    global _reminder_scheduler
    if _reminder_scheduler is None:
        _reminder_scheduler = ReminderScheduler(send_callback=send_whatsapp_reminder)
    return _reminder_scheduler


async def get_current_user_id(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """
    Resolve the bearer token to a Supabase Auth user id

    Returns:
        The user id, or None when the request is anonymous or the token is rejected
    """
    if not authorization:
        return None
    return await resolve_user_id(await get_supabase_client(), authorization)


# Per-request state managers, the way a screen instantiates them on mount

def get_habit_registry(repository=Depends(get_repository), cache=Depends(get_cache),
                       notifier=Depends(get_reminder_scheduler)) -> HabitRegistry:
    return HabitRegistry(repository, cache, notifier)


def get_completion_log(repository=Depends(get_repository), cache=Depends(get_cache)) -> CompletionLog:
    return CompletionLog(repository, cache)


def get_profile_store(repository=Depends(get_repository)) -> ProfileStore:
    return ProfileStore(repository)
