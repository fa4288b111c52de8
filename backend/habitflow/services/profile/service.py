"""
Profile Service - The signed-in user's profile record
"""
from typing import Optional, Dict, Any
import logging

from pydantic import ValidationError

from habitflow.core.exceptions import (
    InvalidProfileDataError,
    NotAuthenticatedError,
    ProfileNotFoundError
)
from habitflow.models.profile import Profile, ProfileUpdate
from habitflow.utils.messages import get_message
from habitflow.utils.timezone import get_utc_now

logger = logging.getLogger(__name__)


class ProfileStore:
    """Loads, updates and formats a single user profile"""

    def __init__(self, repository):
        self.repository = repository
        self.user_id: Optional[str] = None
        self.profile: Optional[Profile] = None
        self.loading = True
        self.error: Optional[str] = None

    async def load(self, user_id: Optional[str]) -> None:
        if not user_id:
            return

        self.user_id = user_id
        self.loading = True
        try:
            row = await self.repository.get_profile(user_id)
            if row is None:
                raise ProfileNotFoundError(f"No profile for user {user_id}")
            self.profile = Profile(**row)
            self.error = None
        except Exception as e:
            logger.error(f"Error loading profile: {e}")
            self.error = get_message("profile_load_failed")
        finally:
            self.loading = False

    async def refetch(self) -> None:
        await self.load(self.user_id)

    async def update(self, user_id: Optional[str], updates: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial profile update

        Only full_name, timezone and whatsapp_number are writable; email is dropped.

        Returns:
            Dict with the updated Profile under "data" and None or the exception under "error"
        """
        if not user_id:
            return {"data": None, "error": NotAuthenticatedError()}

        try:
            try:
                update_data = ProfileUpdate(**updates).model_dump(exclude_unset=True)
            except ValidationError as e:
                raise InvalidProfileDataError(str(e)) from e
            update_data["updated_at"] = get_utc_now().isoformat()

            row = await self.repository.update_profile(user_id, update_data)
            self.profile = Profile(**row)
            return {"data": self.profile, "error": None}
        except Exception as e:
            logger.error(f"Error updating profile: {e}")
            return {"data": None, "error": e}

    def display_name(self) -> str:
        if not self.profile:
            return get_message("default_display_name")
        return self.profile.full_name or self.profile.email.split("@")[0]

    def initials(self) -> str:
        if not self.profile:
            return "?"

        if self.profile.full_name:
            return "".join(name[0] for name in self.profile.full_name.split()).upper()[:2]

        return self.profile.email[:1].upper() or "?"
