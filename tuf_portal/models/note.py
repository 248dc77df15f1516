from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Integer
from sqlalchemy.orm import relationship
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class Note(Base):
    __tablename__ = "notes"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    dept = Column(String, nullable=False, index=True)
    semester = Column(Integer, nullable=False)
    course_code = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    file_url = Column(String, nullable=False)
    pages = Column(Integer, nullable=False, default=0)
    uploaded_by = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    downloads = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=naive_utc_now, index=True)

    uploader = relationship("User", back_populates="uploaded_notes")
