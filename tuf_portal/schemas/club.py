from pydantic import Field
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel


class ClubCreate(CamelInput):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    instagram: Optional[str] = None
    email: Optional[str] = None
    meeting_time: Optional[str] = None


class ClubOut(CamelModel):
    id: str
    name: str
    category: str
    description: Optional[str] = None
    instagram: Optional[str] = None
    email: Optional[str] = None
    meeting_time: Optional[str] = None
    created_at: Optional[datetime] = None
