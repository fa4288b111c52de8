"""
Notifications module
Reminder formatting, delivery and daily scheduling
"""
from .service import (
    NotificationService,
    format_reminder,
    format_reminder_title
)
from .reminders import ReminderScheduler, send_whatsapp_reminder

__all__ = [
    'NotificationService',
    'format_reminder',
    'format_reminder_title',
    'ReminderScheduler',
    'send_whatsapp_reminder'
]
