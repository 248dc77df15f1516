from sqlalchemy import Column, String, DateTime, Text
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class Club(Base):
    __tablename__ = "clubs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)  # IEEE, ACM, Dept, Cultural
    description = Column(Text, nullable=True)
    instagram = Column(String, nullable=True)
    email = Column(String, nullable=True)
    meeting_time = Column(String, nullable=True)
    created_at = Column(DateTime, default=naive_utc_now)
