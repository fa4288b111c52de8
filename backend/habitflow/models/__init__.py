"""
Pydantic models for the application
"""
from habitflow.models.habit import Habit, HabitCreate, HabitUpdate, parse_reminder_time
from habitflow.models.habit_log import HabitLog, ToggleRequest, WeeklyStats
from habitflow.models.profile import Profile, ProfileUpdate

__all__ = [
    "Habit",
    "HabitCreate",
    "HabitUpdate",
    "parse_reminder_time",
    "HabitLog",
    "ToggleRequest",
    "WeeklyStats",
    "Profile",
    "ProfileUpdate"
]
