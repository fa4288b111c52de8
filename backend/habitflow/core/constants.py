"""
Application constants
"""

# Habits
HABIT_TITLE_MAX_LENGTH = 50
DEFAULT_EMOJI = "⭐"
DEFAULT_REMINDER_TIME = "09:00"

EMOJI_PALETTE = [
    "💪", "🏃", "📚", "💧", "🧘", "🍎", "💤", "🚶", "📝", "🎵",
    "🎨", "💻", "📱", "🧹", "🌱", "☕", "🥗", "🍵", "📖", "✍️",
    "🎯", "💡", "🔥", "⭐", "🌟", "🎉", "🚀", "💎", "🏆", "👑",
]

# Completion logs
LOG_WINDOW_DAYS = 30
WEEK_DAYS = 7

# Profile
DEFAULT_PROFILE_TIMEZONE = "Europe/Paris"

TIMEZONE_OPTIONS = [
    {"label": "Paris (Europe/Paris)", "value": "Europe/Paris"},
    {"label": "London (Europe/London)", "value": "Europe/London"},
    {"label": "New York (America/New_York)", "value": "America/New_York"},
    {"label": "Los Angeles (America/Los_Angeles)", "value": "America/Los_Angeles"},
    {"label": "Tokyo (Asia/Tokyo)", "value": "Asia/Tokyo"},
    {"label": "Sydney (Australia/Sydney)", "value": "Australia/Sydney"},
]

# Local cache keys
HABITS_CACHE_PREFIX = "habits_"
LOGS_CACHE_PREFIX = "logs_"

# Reminder jobs
REMINDER_JOB_PREFIX = "habit_"
