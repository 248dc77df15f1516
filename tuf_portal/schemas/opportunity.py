from pydantic import Field
from typing import Optional
from datetime import date, datetime

from tuf_portal.schemas.base import CamelInput, CamelModel


class OpportunityCreate(CamelInput):
    type: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    deadline: Optional[date] = None
    link: Optional[str] = None
    contact: Optional[str] = None
    tags: Optional[list[str]] = None


class OpportunityOut(CamelModel):
    id: str
    type: str
    title: str
    description: Optional[str] = None
    deadline: Optional[date] = None
    link: Optional[str] = None
    contact: Optional[str] = None
    tags: Optional[list[str]] = None
    created_at: Optional[datetime] = None
