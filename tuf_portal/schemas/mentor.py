from pydantic import Field
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel
from tuf_portal.schemas.user import UserOut


class MentorCreate(CamelInput):
    interests: Optional[list[str]] = None
    availability: Optional[str] = None
    contact_whatsapp: Optional[str] = Field(None, max_length=32)
    contact_email: Optional[str] = None
    is_available: bool = True


class MentorUpdate(CamelInput):
    interests: Optional[list[str]] = None
    availability: Optional[str] = None
    contact_whatsapp: Optional[str] = Field(None, max_length=32)
    contact_email: Optional[str] = None
    is_available: Optional[bool] = None


class MentorOut(CamelModel):
    id: str
    user_id: str
    interests: Optional[list[str]] = None
    availability: Optional[str] = None
    contact_whatsapp: Optional[str] = None
    contact_email: Optional[str] = None
    rating: int = 0
    is_available: bool = True
    created_at: Optional[datetime] = None


class MentorWithUser(MentorOut):
    user: UserOut
