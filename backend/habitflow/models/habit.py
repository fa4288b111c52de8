"""
Pydantic models for habits
"""
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Tuple

from habitflow.core.constants import (
    DEFAULT_EMOJI,
    DEFAULT_REMINDER_TIME,
    HABIT_TITLE_MAX_LENGTH
)


def parse_reminder_time(value: str) -> Tuple[int, int]:
    """
    Split a reminder time into hour and minute

    Args:
        value: Time in HH:MM or HH:MM:SS format (24-hour)

    Returns:
        Tuple of (hour, minute)

    Raises:
        ValueError: If the value is not a valid 24-hour time
    """
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            parsed = datetime.strptime(value, fmt)
            return parsed.hour, parsed.minute
        except (TypeError, ValueError):
            continue
    raise ValueError(f"Invalid time format '{value}'. Use HH:MM (24-hour format)")


class Habit(BaseModel):
    """A habit row as stored in the habits table"""
    id: str
    user_id: str
    title: str
    emoji: str = DEFAULT_EMOJI
    reminder_time: str
    created_at: Optional[datetime] = None


class HabitCreate(BaseModel):
    """Request model for creating a new habit"""
    title: str = Field(..., min_length=1, max_length=HABIT_TITLE_MAX_LENGTH, description="Habit title")
    emoji: str = Field(default=DEFAULT_EMOJI, min_length=1, description="Emoji shown next to the habit")
    reminder_time: str = Field(default=DEFAULT_REMINDER_TIME, description="Daily reminder in HH:MM format (24-hour)")

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("reminder_time")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Validate time format is HH:MM"""
        parse_reminder_time(v)
        return v


class HabitUpdate(BaseModel):
    """Request model for a partial habit update"""
    title: Optional[str] = Field(None, min_length=1, max_length=HABIT_TITLE_MAX_LENGTH)
    emoji: Optional[str] = Field(None, min_length=1)
    reminder_time: Optional[str] = Field(None, description="Daily reminder in HH:MM format (24-hour)")

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("reminder_time")
    @classmethod
    def validate_time_format(cls, v: Optional[str]) -> Optional[str]:
        """Validate time format is HH:MM if provided"""
        if v is None:
            return v
        parse_reminder_time(v)
        return v
