from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from tuf_portal.models.user import UserRole
from tuf_portal.schemas.base import CamelInput, CamelModel


class UserOut(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    year: Optional[int] = None
    program: Optional[str] = None
    department: Optional[str] = None
    intro: Optional[str] = None
    skills: Optional[list[str]] = None
    phone: Optional[str] = None
    role: UserRole = UserRole.student
    socials: Optional[dict[str, str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileUpdate(CamelInput):
    """Self-service profile fields. ``id`` and ``role`` are never accepted from the caller."""

    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    year: Optional[int] = Field(None, ge=1, le=4)
    program: Optional[str] = None
    department: Optional[str] = None
    intro: Optional[str] = None
    skills: Optional[list[str]] = None
    phone: Optional[str] = None
    socials: Optional[dict[str, str]] = None

    @field_validator('email')
    def normalize_email(cls, v: str | None):
        return v.lower() if v is not None else v

    @field_validator('skills')
    def strip_skills(cls, v: list[str] | None):
        if v is None:
            return v
        return [s.strip() for s in v if s and s.strip()]


class IdentityClaims(CamelModel):
    """Fields the identity provider supplies at login; upserted onto the user row."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    @field_validator('email')
    def normalize_email(cls, v: str | None):
        return v.lower() if v else None
