"""
External service integrations
"""
from .whatsapp import send_whatsapp_message, is_twilio_configured

__all__ = ['send_whatsapp_message', 'is_twilio_configured']
