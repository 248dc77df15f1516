from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Integer, Boolean, JSON
from sqlalchemy.orm import relationship
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class Mentor(Base):
    __tablename__ = "mentors"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    # One mentor row per user by convention; the mutation layer enforces it
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    interests = Column(JSON, nullable=True)
    availability = Column(Text, nullable=True)
    contact_whatsapp = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    rating = Column(Integer, nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=naive_utc_now)

    user = relationship("User", back_populates="mentor_profiles")
