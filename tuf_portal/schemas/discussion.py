from pydantic import Field
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel


class DiscussionChannelCreate(CamelInput):
    label: str = Field(..., min_length=1)
    platform: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    topic_tags: Optional[list[str]] = None


class DiscussionChannelOut(CamelModel):
    id: str
    label: str
    platform: str
    url: str
    topic_tags: Optional[list[str]] = None
    created_at: Optional[datetime] = None
