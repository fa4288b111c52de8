"""
WhatsApp Service - Twilio messaging logic
Delivery channel for fired habit reminders
"""
import logging
from twilio.rest import Client

from habitflow.core.config import settings

logger = logging.getLogger(__name__)

# Initialize Twilio client if credentials are available
twilio_client = None
if settings.TWILIO_ACCOUNT_SID and settings.TWILIO_AUTH_TOKEN:
    twilio_client = Client(settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN)
    logger.info("Twilio client initialized successfully")
else:
    logger.warning("Twilio credentials not found. WhatsApp reminders will not be delivered.")


def send_whatsapp_message(to_number: str, message: str) -> str:
    """
    Send a WhatsApp message via Twilio

    Args:
        to_number: Recipient WhatsApp number (e.g., "whatsapp:+33612345678")
        message: Message text to send

    Returns:
        Message SID from Twilio

    Raises:
        RuntimeError if Twilio client not configured, or the Twilio error
        if the send fails
    """
    if not twilio_client:
        raise RuntimeError("Twilio client not configured")

    logger.info(f"[TWILIO] Sending message to {to_number}")

    try:
        twilio_message = twilio_client.messages.create(
            from_=settings.TWILIO_WHATSAPP_NUMBER or "whatsapp:+14155238886",
            body=message,
            to=to_number
        )
        logger.info(f"[TWILIO] Message sent with SID: {twilio_message.sid}")
        return twilio_message.sid
    except Exception as e:
        logger.error(f"[TWILIO] Send failed: {str(e)}")
        raise


def is_twilio_configured() -> bool:
    """Check if Twilio client is configured"""
    return twilio_client is not None
