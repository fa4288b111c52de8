"""
Completion logs module - Per-day completion state, streaks and weekly stats
"""
from .service import CompletionLog, logs_cache_key
from .stats import get_habit_stats, get_overview

__all__ = [
    'CompletionLog',
    'logs_cache_key',
    'get_habit_stats',
    'get_overview'
]
