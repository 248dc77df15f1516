from sqlalchemy import Column, String, DateTime, Date, Text, JSON
import uuid

from tuf_portal.db import Base
from tuf_portal.utils.datetime import naive_utc_now


class Opportunity(Base):
    __tablename__ = "opportunities"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    type = Column(String, nullable=False, index=True)  # IFP, Internship, NPTEL, Hackathon, Cert
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    deadline = Column(Date, nullable=True)
    link = Column(String, nullable=True)
    contact = Column(String, nullable=True)
    tags = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=naive_utc_now, index=True)
