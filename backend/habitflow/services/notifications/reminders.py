"""
Reminder Scheduler - Daily habit reminders on an APScheduler instance
One cron job per habit, identified by habit_{habit_id}
"""
import logging
from typing import Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from habitflow.core.config import settings
from habitflow.core.constants import REMINDER_JOB_PREFIX
from habitflow.models.habit import parse_reminder_time
from habitflow.services.external.whatsapp import send_whatsapp_message, is_twilio_configured
from habitflow.utils.timezone import get_app_tz
from .service import NotificationService, format_reminder_title

logger = logging.getLogger(__name__)


def send_whatsapp_reminder(recipient: str, message: str) -> bool:
    """
    Deliver a reminder via WhatsApp

    Args:
        recipient: The owner's number in E.164 format (e.g., "+33612345678")
        message: Message text to send

    Returns:
        True if sent successfully, False otherwise
    """
    if not is_twilio_configured():
        logger.warning("Cannot send WhatsApp message - Twilio client not configured")
        return False

    try:
        send_whatsapp_message(f"whatsapp:{recipient}", message)
        return True
    except Exception as e:
        logger.error(f"Failed to send WhatsApp message: {e}")
        return False


def reminder_job_id(habit_id: str) -> str:
    return f"{REMINDER_JOB_PREFIX}{habit_id}"


class ReminderScheduler:
    """
    Schedules one recurring daily reminder per habit.

    When notifications are disabled every call is a logged no-op, like a
    platform without notification support.
    """

    def __init__(self, scheduler: Optional[BackgroundScheduler] = None,
                 enabled: Optional[bool] = None, send_callback=None,
                 timezone: Optional[str] = None):
        self.enabled = settings.NOTIFICATIONS_ENABLED if enabled is None else enabled
        self.timezone = get_app_tz(timezone)
        self.scheduler = scheduler or BackgroundScheduler(timezone=self.timezone)
        self.notification_service = NotificationService(send_callback)

    def start(self):
        """Start the underlying scheduler"""
        if not self.enabled:
            logger.info("Notifications disabled - reminder scheduler not started")
            return
        if self.scheduler.running:
            logger.warning("Reminder scheduler already running")
            return
        self.scheduler.start()
        logger.info("Reminder scheduler started")

    def shutdown(self):
        """Stop the underlying scheduler"""
        if self.scheduler.running:
            self.scheduler.shutdown()
            logger.info("Reminder scheduler stopped")

    def get_job(self, habit_id: str):
        return self.scheduler.get_job(reminder_job_id(habit_id))

    async def schedule(self, habit_id: str, title: str, emoji: str, reminder_time: str,
                       recipient: Optional[str] = None, timezone: Optional[str] = None) -> None:
        """
        Replace the daily reminder for a habit

        A habit whose owner has no contact gets no job, and any previous
        job for it is removed.

        Args:
            habit_id: The habit id
            title: Habit title shown in the reminder
            emoji: Habit emoji shown in the reminder
            reminder_time: Time in HH:MM format (24-hour)
            recipient: The owner's WhatsApp number
            timezone: The owner's IANA timezone, defaults to the scheduler's
        """
        if not self.enabled:
            logger.debug(f"Notifications disabled - skipping reminder for habit {habit_id}")
            return

        try:
            await self.cancel(habit_id)

            if not recipient:
                logger.info(f"No contact for the owner of habit {habit_id} - reminder not scheduled")
                return

            hour, minute = parse_reminder_time(reminder_time)
            tz = get_app_tz(timezone) if timezone else self.timezone
            self.scheduler.add_job(
                func=self.notification_service.send_reminder,
                trigger=CronTrigger(hour=hour, minute=minute, timezone=tz),
                args=[title, emoji, recipient],
                id=reminder_job_id(habit_id),
                name=format_reminder_title(title, emoji),
                replace_existing=True
            )
            logger.info(f"Reminder scheduled for habit: {title} at {hour:02d}:{minute:02d} ({tz.zone})")
        except Exception as e:
            logger.error(f"Error scheduling reminder for habit {habit_id}: {e}")

    async def cancel(self, habit_id: str) -> None:
        """Remove the scheduled reminder for a habit, if any"""
        if not self.enabled:
            return

        try:
            self.scheduler.remove_job(reminder_job_id(habit_id))
            logger.info(f"Reminder cancelled for habit: {habit_id}")
        except JobLookupError:
            logger.debug(f"No reminder scheduled for habit: {habit_id}")

    async def cancel_all(self) -> None:
        """Remove every scheduled reminder"""
        if not self.enabled:
            return

        self.scheduler.remove_all_jobs()
        logger.info("All reminders cancelled")
