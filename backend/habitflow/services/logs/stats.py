"""
Statistics overview across all of a user's habits
"""
from typing import Dict, Any, List

from habitflow.core.constants import WEEK_DAYS
from habitflow.models.habit import Habit


def get_habit_stats(habit: Habit, completion_log) -> Dict[str, Any]:
    """
    Per-habit metrics

    Returns:
        Dict with habit id, streak, weekly stats and today's completion
    """
    return {
        "habit_id": habit.id,
        "title": habit.title,
        "emoji": habit.emoji,
        "streak": completion_log.streak_length(habit.id),
        "weekly": completion_log.weekly_stats(habit.id).model_dump(),
        "completed_today": completion_log.is_completed_on(habit.id, completion_log.today())
    }


def get_overview(habits: List[Habit], completion_log) -> Dict[str, Any]:
    """
    Aggregate metrics for the stats screen

    Args:
        habits: The user's habits
        completion_log: A loaded CompletionLog

    Returns:
        Dict with total_habits, weekly_percentage, longest_streak,
        active_streaks, completed_today and the per-habit breakdown
    """
    per_habit = [get_habit_stats(habit, completion_log) for habit in habits]

    total_habits = len(habits)
    weekly_completed = sum(h["weekly"]["completed"] for h in per_habit)
    weekly_possible = total_habits * WEEK_DAYS
    weekly_percentage = round(weekly_completed / weekly_possible * 100) if weekly_possible > 0 else 0

    return {
        "total_habits": total_habits,
        "weekly_percentage": weekly_percentage,
        "longest_streak": max([h["streak"] for h in per_habit], default=0),
        "active_streaks": sum(1 for h in per_habit if h["streak"] > 0),
        "completed_today": sum(1 for h in per_habit if h["completed_today"]),
        "habits": per_habit
    }
