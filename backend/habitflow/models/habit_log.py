"""
Pydantic models for per-day completion records
"""
import datetime
from pydantic import BaseModel, Field
from typing import Optional


class HabitLog(BaseModel):
    """A row of the habit_logs table: one habit on one calendar day"""
    id: str
    habit_id: str
    date: datetime.date
    completed: bool = False
    completed_at: Optional[datetime.datetime] = None


class ToggleRequest(BaseModel):
    """Request model for toggling a habit's completion"""
    date: Optional[datetime.date] = Field(None, description="Calendar day to toggle within the last 30 days, defaults to today")


class WeeklyStats(BaseModel):
    """Completion count over the trailing 7-day window including today"""
    completed: int
    total: int
    percentage: int
