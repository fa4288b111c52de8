"""
Pydantic models for user profiles
"""
from datetime import datetime
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from habitflow.core.constants import DEFAULT_PROFILE_TIMEZONE
from habitflow.utils.timezone import is_valid_timezone

E164_PATTERN = re.compile(r"^\+[1-9]\d{6,14}$")


class Profile(BaseModel):
    """A row of the users table, keyed by the auth user id"""
    id: str
    email: str
    full_name: Optional[str] = None
    timezone: str = DEFAULT_PROFILE_TIMEZONE
    whatsapp_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    """Request model for a partial profile update. Email is read-only."""
    model_config = ConfigDict(extra="ignore")

    full_name: Optional[str] = Field(None, description="Display name, blank clears it")
    timezone: Optional[str] = Field(None, description="IANA timezone identifier")
    whatsapp_number: Optional[str] = Field(
        None, description="Reminder contact in E.164 format (e.g., '+33612345678'), blank clears it"
    )

    @field_validator("full_name", "whatsapp_number", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_valid_timezone(v):
            raise ValueError(f"Unknown timezone '{v}'")
        return v

    @field_validator("whatsapp_number")
    @classmethod
    def validate_whatsapp_number(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not E164_PATTERN.match(v):
            raise ValueError("WhatsApp number must be in E.164 format, like +33612345678")
        return v
