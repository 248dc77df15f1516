from sqlalchemy import Column, String, DateTime, ForeignKey, Text, JSON
from sqlalchemy.orm import relationship
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    organizer = Column(String, nullable=False)
    date = Column(DateTime, nullable=False, index=True)  # naive UTC
    location = Column(String, nullable=True)
    link = Column(String, nullable=True)
    tags = Column(JSON, nullable=True)
    created_by = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime, default=naive_utc_now)

    creator = relationship("User", back_populates="created_events")
