"""
Business logic services
"""
from . import habits
from . import logs
from . import profile
from . import cache
from . import notifications
from . import external

__all__ = [
    'habits',
    'logs',
    'profile',
    'cache',
    'notifications',
    'external'
]
