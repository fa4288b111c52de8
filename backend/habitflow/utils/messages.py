"""
User-facing message catalog

Errors shown to users are generic; details only go to the logs.
"""
from typing import Optional

from habitflow.core.config import settings

FALLBACK_LOCALE = "en"

MESSAGES = {
    "fr": {
        "habits_load_failed": "Impossible de charger vos habitudes",
        "habit_create_failed": "Impossible de créer l'habitude",
        "habit_update_failed": "Impossible de mettre à jour l'habitude",
        "habit_delete_failed": "Impossible de supprimer l'habitude",
        "logs_load_failed": "Impossible de charger l'historique",
        "toggle_failed": "Impossible de mettre à jour l'habitude",
        "profile_load_failed": "Impossible de charger le profil",
        "profile_update_failed": "Impossible de mettre à jour le profil",
        "not_authenticated": "Vous devez être connecté",
        "default_display_name": "Utilisateur",
        "reminder_body": "C'est l'heure de pratiquer votre habitude !",
        "greeting_morning": "Bonjour",
        "greeting_afternoon": "Bon après-midi",
        "greeting_evening": "Bonsoir",
    },
    "en": {
        "habits_load_failed": "Could not load your habits",
        "habit_create_failed": "Could not create the habit",
        "habit_update_failed": "Could not update the habit",
        "habit_delete_failed": "Could not delete the habit",
        "logs_load_failed": "Could not load your history",
        "toggle_failed": "Could not update the habit",
        "profile_load_failed": "Could not load your profile",
        "profile_update_failed": "Could not update your profile",
        "not_authenticated": "You must be signed in",
        "default_display_name": "User",
        "reminder_body": "Time to practice your habit!",
        "greeting_morning": "Good morning",
        "greeting_afternoon": "Good afternoon",
        "greeting_evening": "Good evening",
    },
}


def get_message(key: str, locale: Optional[str] = None) -> str:
    """
    Look up a localized message

    Unknown locales fall back to English, unknown keys to the key itself.
    """
    catalog = MESSAGES.get(locale or settings.APP_LOCALE, MESSAGES[FALLBACK_LOCALE])
    return catalog.get(key, MESSAGES[FALLBACK_LOCALE].get(key, key))


def greeting(hour: int, locale: Optional[str] = None) -> str:
    """Time-of-day greeting for the given local hour"""
    if hour < 12:
        return get_message("greeting_morning", locale)
    if hour < 18:
        return get_message("greeting_afternoon", locale)
    return get_message("greeting_evening", locale)
