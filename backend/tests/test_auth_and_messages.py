from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from habitflow.core.auth import extract_bearer_token, resolve_user_id
from habitflow.services.notifications import reminders
from habitflow.utils.messages import get_message, greeting


def make_auth_client(response=None, error=None):
    client = MagicMock()
    client.auth.get_user = AsyncMock(return_value=response, side_effect=error)
    return client


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("bearer  abc ") == "abc"
    assert extract_bearer_token("Basic abc") is None
    assert extract_bearer_token("Bearer ") is None
    assert extract_bearer_token(None) is None


async def test_resolve_user_id_from_session():
    client = make_auth_client(SimpleNamespace(user=SimpleNamespace(id="user-1")))

    assert await resolve_user_id(client, "Bearer token") == "user-1"
    client.auth.get_user.assert_awaited_once_with("token")


async def test_rejected_token_has_no_user():
    client = make_auth_client(error=RuntimeError("invalid JWT"))

    assert await resolve_user_id(client, "Bearer token") is None


async def test_missing_header_skips_lookup():
    client = make_auth_client()

    assert await resolve_user_id(client, None) is None
    client.auth.get_user.assert_not_awaited()


def test_greeting_by_hour():
    assert greeting(8, "en") == "Good morning"
    assert greeting(12, "en") == "Good afternoon"
    assert greeting(18, "fr") == "Bonsoir"


def test_unknown_locale_falls_back_to_english():
    assert get_message("default_display_name", "de") == "User"
    assert get_message("no_such_key", "fr") == "no_such_key"


def test_whatsapp_reminder_needs_configuration(monkeypatch):
    monkeypatch.setattr(reminders, "is_twilio_configured", lambda: False)

    assert reminders.send_whatsapp_reminder("+33600000000", "hello") is False


def test_whatsapp_reminder_delivers_to_owner(monkeypatch):
    sent = []
    monkeypatch.setattr(reminders, "is_twilio_configured", lambda: True)
    monkeypatch.setattr(reminders, "send_whatsapp_message", lambda to, message: sent.append((to, message)))

    assert reminders.send_whatsapp_reminder("+33600000000", "hello") is True
    assert reminders.send_whatsapp_reminder("+14155550100", "hi") is True
    assert sent == [("whatsapp:+33600000000", "hello"), ("whatsapp:+14155550100", "hi")]


def test_whatsapp_reminder_send_failure(monkeypatch):
    def failing(to, message):
        raise RuntimeError("twilio down")

    monkeypatch.setattr(reminders, "is_twilio_configured", lambda: True)
    monkeypatch.setattr(reminders, "send_whatsapp_message", failing)

    assert reminders.send_whatsapp_reminder("+33600000000", "hello") is False
