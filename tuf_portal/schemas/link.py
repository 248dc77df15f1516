from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel


class LinkCreate(CamelInput):
    label: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    group: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator('url')
    def validate_url(cls, v: str):
        # avoid strict HttpUrl; some directory entries are mailto: or wa.me links
        if not v.startswith(('http://', 'https://', 'mailto:')):
            raise ValueError('url must start with http(s):// or mailto:')
        return v


class LinkOut(CamelModel):
    id: str
    label: str
    url: str
    group: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
