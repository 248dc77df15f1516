from pydantic import Field
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel


class ProjectIfpCreate(CamelInput):
    title: str = Field(..., min_length=1)
    dept: str = Field(..., min_length=1)
    area: str = Field(..., min_length=1)
    brief: Optional[str] = None
    guide_name: str = Field(..., min_length=1)
    contact: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900, le=2100)
    link: Optional[str] = None


class ProjectIfpOut(CamelModel):
    id: str
    title: str
    dept: str
    area: str
    brief: Optional[str] = None
    guide_name: str
    contact: str
    year: int
    link: Optional[str] = None
    created_at: Optional[datetime] = None
