from sqlalchemy import Column, String, DateTime, Integer, Text
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class ProjectIfp(Base):
    __tablename__ = "projects_ifp"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    dept = Column(String, nullable=False, index=True)
    area = Column(String, nullable=False)
    brief = Column(Text, nullable=True)
    guide_name = Column(String, nullable=False)
    contact = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    link = Column(String, nullable=True)
    created_at = Column(DateTime, default=naive_utc_now)
