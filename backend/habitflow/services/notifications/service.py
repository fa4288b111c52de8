"""
Notifications Service - Message formatting and delivery
Centralizes the reminder message template and sending logic
"""
import logging
from typing import Optional

from habitflow.utils.messages import get_message

logger = logging.getLogger(__name__)


# ============================================================================
# MESSAGE FORMATTING
# ============================================================================

def format_reminder_title(habit_title: str, emoji: str) -> str:
    """Notification title: the habit's emoji followed by its title"""
    return f"{emoji} {habit_title}"


def format_reminder(habit_title: str, emoji: str, locale: Optional[str] = None) -> str:
    """
    Format a daily reminder message

    Args:
        habit_title: The habit title
        emoji: The habit emoji
        locale: Optional message locale

    Returns:
        Formatted reminder message
    """
    return f"{format_reminder_title(habit_title, emoji)}\n\n{get_message('reminder_body', locale)}"


# ============================================================================
# NOTIFICATION SENDING
# ============================================================================

class NotificationService:
    """
    Service for sending notifications via various channels
    """

    def __init__(self, send_callback=None):
        """
        Initialize notification service

        Args:
            send_callback: Optional callback function for sending messages
                          Should have signature: callback(recipient: str, message: str) -> bool
        """
        self.send_callback = send_callback

    def send_notification(self, message: str, recipient: Optional[str] = None) -> bool:
        """
        Send a notification message

        Args:
            message: The message to send
            recipient: Contact of the user the message is for

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.send_callback:
            logger.warning("No send callback configured - notification not sent")
            logger.info(f"Would have sent: {message}")
            return False

        if not recipient:
            logger.warning("No recipient for notification - not sent")
            return False

        try:
            result = self.send_callback(recipient, message)
            if result:
                logger.info("Notification sent successfully")
            else:
                logger.warning("Notification send callback returned False")
            return result
        except Exception as e:
            logger.error(f"Failed to send notification: {e}")
            return False

    def send_reminder(self, habit_title: str, emoji: str, recipient: Optional[str] = None) -> bool:
        """
        Send a habit reminder to the habit's owner

        Returns:
            True if sent successfully, False otherwise
        """
        return self.send_notification(format_reminder(habit_title, emoji), recipient)
