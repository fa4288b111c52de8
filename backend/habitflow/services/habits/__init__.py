"""
Habits module - Core habit management functionality
"""
from . import repository
from . import service

from .repository import HabitRepository
from .service import HabitRegistry, habits_cache_key

__all__ = [
    # Modules
    'repository',
    'service',

    'HabitRepository',
    'HabitRegistry',
    'habits_cache_key'
]
