"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables"""

    # Database / Auth
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

    # Locale
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "Europe/Paris")
    APP_LOCALE: str = os.getenv("APP_LOCALE", "fr")

    # Local cache
    CACHE_BACKEND: str = os.getenv("CACHE_BACKEND", "memory")
    CACHE_DIR: str = os.getenv("CACHE_DIR", ".cache/habitflow")

    # Reminders
    NOTIFICATIONS_ENABLED: bool = _env_flag("NOTIFICATIONS_ENABLED")

    # WhatsApp / Twilio
    TWILIO_ACCOUNT_SID: str = os.getenv("TWILIO_ACCOUNT_SID", "")
    TWILIO_AUTH_TOKEN: str = os.getenv("TWILIO_AUTH_TOKEN", "")
    TWILIO_WHATSAPP_NUMBER: str = os.getenv("TWILIO_WHATSAPP_NUMBER", "")


# Create a global settings instance
settings = Settings()
