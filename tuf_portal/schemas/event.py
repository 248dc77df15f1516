from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel
from tuf_portal.schemas.user import UserOut
from tuf_portal.utils.datetime import to_naive_utc


class EventCreate(CamelInput):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    organizer: str = Field(..., min_length=1)
    date: datetime
    location: Optional[str] = None
    link: Optional[str] = None
    tags: Optional[list[str]] = None

    @field_validator('date')
    def store_as_utc(cls, v: datetime):
        return to_naive_utc(v)


class EventOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    organizer: str
    date: datetime
    location: Optional[str] = None
    link: Optional[str] = None
    tags: Optional[list[str]] = None
    created_by: str
    created_at: Optional[datetime] = None


class EventWithCreator(EventOut):
    creator: UserOut
