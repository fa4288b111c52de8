"""
Log Routes - Completion history and statistics overview
"""
from typing import Optional

from fastapi import APIRouter, Depends

from habitflow.core.dependencies import (
    get_completion_log,
    get_current_user_id,
    get_habit_registry
)
from habitflow.services.logs import get_overview
from habitflow.routes.errors import require_user

router = APIRouter(tags=["logs"])


@router.get("/logs")
async def list_logs(user_id: Optional[str] = Depends(get_current_user_id),
                    completion_log=Depends(get_completion_log)):
    """Completion records of the last 30 days, newest first"""
    await completion_log.load(require_user(user_id))
    return {
        "status": "success",
        "logs": completion_log.logs,
        "error": completion_log.error
    }


@router.get("/stats/overview")
async def stats_overview(user_id: Optional[str] = Depends(get_current_user_id),
                         registry=Depends(get_habit_registry),
                         completion_log=Depends(get_completion_log)):
    """Aggregate streak and weekly statistics across all habits"""
    require_user(user_id)
    await registry.load(user_id)
    await completion_log.load(user_id)
    return {
        "status": "success",
        "date": str(completion_log.today()),
        **get_overview(registry.habits, completion_log),
        "error": registry.error or completion_log.error
    }
