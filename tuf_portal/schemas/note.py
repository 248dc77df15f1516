from pydantic import Field
from typing import Optional
from datetime import datetime

from tuf_portal.schemas.base import CamelInput, CamelModel
from tuf_portal.schemas.user import UserOut


class NoteCreate(CamelInput):
    dept: str = Field(..., min_length=1)
    semester: int = Field(..., ge=1)
    course_code: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    file_url: str = Field(..., min_length=1)
    pages: int = Field(0, ge=0)


class NoteOut(CamelModel):
    id: str
    dept: str
    semester: int
    course_code: str
    title: str
    description: Optional[str] = None
    file_url: str
    pages: int = 0
    uploaded_by: str
    downloads: int = 0
    created_at: Optional[datetime] = None


class NoteWithUploader(NoteOut):
    uploader: UserOut
