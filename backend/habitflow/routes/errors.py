"""
Map manager result errors to HTTP responses
"""
from typing import Optional
import logging

from fastapi import HTTPException

from habitflow.core.exceptions import (
    HabitNotFoundError,
    InvalidDataError,
    NotAuthenticatedError,
    ProfileNotFoundError
)
from habitflow.utils.messages import get_message

logger = logging.getLogger(__name__)


def require_user(user_id: Optional[str]) -> str:
    if not user_id:
        raise HTTPException(status_code=401, detail=get_message("not_authenticated"))
    return user_id


def raise_for_error(error: Optional[Exception], message_key: str) -> None:
    """
    Raise the HTTPException matching a manager error, if any

    Args:
        error: The "error" entry of a manager result
        message_key: Message shown for unexpected failures
    """
    if error is None:
        return
    if isinstance(error, NotAuthenticatedError):
        raise HTTPException(status_code=401, detail=get_message("not_authenticated"))
    if isinstance(error, InvalidDataError):
        raise HTTPException(status_code=400, detail=str(error))
    if isinstance(error, (HabitNotFoundError, ProfileNotFoundError)):
        raise HTTPException(status_code=404, detail=str(error))
    logger.error(f"Request failed: {error}")
    raise HTTPException(status_code=500, detail=get_message(message_key))
