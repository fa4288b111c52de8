"""
Auth - Resolve Supabase Auth sessions to user ids
Sign in/up/out happen client-side; the backend only consumes the user id.
"""
from typing import Optional
import logging

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of an 'Authorization: Bearer <token>' header"""
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


async def resolve_user_id(client, authorization: Optional[str]) -> Optional[str]:
    """
    Look up the user behind an access token

    Args:
        client: Supabase AsyncClient
        authorization: Raw Authorization header value

    Returns:
        The user id, or None if there is no valid session
    """
    token = extract_bearer_token(authorization)
    if not token:
        return None

    try:
        response = await client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Rejected access token: {e}")
        return None

    if not response or not response.user:
        return None
    return response.user.id
