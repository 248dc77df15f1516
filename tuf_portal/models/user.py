from sqlalchemy import Column, String, DateTime, Enum, Integer, Text, JSON
from sqlalchemy.orm import relationship
import enum
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now

class UserRole(enum.Enum):
    student = "student"
    senior = "senior"
    admin = "admin"

class User(Base):
    __tablename__ = "users"
    # id is the identity provider's stable subject, so it survives re-login
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    email = Column(String, unique=True, index=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)

    year = Column(Integer, nullable=True)  # 1-4
    program = Column(String, nullable=True)  # BE/BTech, ME/MTech
    department = Column(String, nullable=True, index=True)
    intro = Column(Text, nullable=True)
    skills = Column(JSON, nullable=True)
    phone = Column(String, nullable=True)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.student)
    socials = Column(JSON, nullable=True)  # {linkedin, github, instagram}

    created_at = Column(DateTime, default=naive_utc_now)
    updated_at = Column(DateTime, default=naive_utc_now)

    mentor_profiles = relationship("Mentor", back_populates="user")
    uploaded_notes = relationship("Note", back_populates="uploader")
    created_events = relationship("Event", back_populates="creator")
